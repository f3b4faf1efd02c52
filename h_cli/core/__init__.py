from .config import Config, SUPPORTED_MODELS, DEFAULT_MODEL, validate_model, init_data_dir
from .conversation import Conversation, ConversationStore, ConversationFormatError, SYSTEM_PROMPT
from .editor import EditorError, open_editor, prompt_file_path, sanitize_file_name

__all__ = [
    "Config",
    "SUPPORTED_MODELS",
    "DEFAULT_MODEL",
    "validate_model",
    "init_data_dir",
    "Conversation",
    "ConversationStore",
    "ConversationFormatError",
    "SYSTEM_PROMPT",
    "EditorError",
    "open_editor",
    "prompt_file_path",
    "sanitize_file_name",
]
