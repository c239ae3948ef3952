from shortener.models.entry_model import EntryModel


__all__ = ['EntryModel']
