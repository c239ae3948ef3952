from datetime import timedelta


# Short URL lifetime; entries strictly older than this are expired
EXPIRY_THRESHOLD = timedelta(hours=24)
EXPIRES_IN = '24 hours'

# Background sweep period
SWEEP_INTERVAL = timedelta(hours=1)

# Routes
SHORTEN_PATH = '/api/shorten'

# Landing page template
TEMPLATES_DIRNAME = 'templates'
LANDING_PAGE_FILENAME = 'index.html'

# Fallback for log lines when the event carries no Host header
DEFAULT_BASE_URL = 'http://localhost:8080'

# Environment variables
APP_ENV_ENV = 'APP_ENV'
APP_NAME_ENV = 'APP_NAME'
LOG_LEVEL_ENV = 'LOG_LEVEL'
PROJECT_ROOT_ENV = 'PROJECT_ROOT'
