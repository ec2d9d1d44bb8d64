from .descriptions import ROW_TYPE_DESCRIPTIONS, TYPE_DESCRIPTIONS, USER_DEFINED_GROUP
from .loader import DictionaryLoader
from .models import Dictionary, HeadingDetail

__all__ = [
    "Dictionary",
    "DictionaryLoader",
    "HeadingDetail",
    "ROW_TYPE_DESCRIPTIONS",
    "TYPE_DESCRIPTIONS",
    "USER_DEFINED_GROUP",
]
