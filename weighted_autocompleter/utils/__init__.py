from .logger_utils import Log
from .config_manager import Config
from .term_loader import load_terms, parse_terms

__all__ = ["Log", "Config", "load_terms", "parse_terms"]
