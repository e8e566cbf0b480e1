from .files import file_to_base64
from .json_safety import beautify_json, json_default, safe_json_parse

__all__ = ["beautify_json", "safe_json_parse", "json_default", "file_to_base64"]
