from shortener.utils.config import app_env, app_name, project_root, templates_dir, landing_page_path
from shortener.utils.helpers import utcnow, base_url, get_short_url, guarantee_500_response
from shortener.utils.logging import initialize_logging


__all__ = [
    'app_env',
    'app_name',
    'project_root',
    'templates_dir',
    'landing_page_path',
    'utcnow',
    'base_url',
    'get_short_url',
    'guarantee_500_response',
    'initialize_logging',
]
