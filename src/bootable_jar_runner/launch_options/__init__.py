"""Launch option exports."""

from .option_merging import merge_option_tokens, prepare_options, tokenize_options
from .option_models import LaunchOptions

__all__ = ["LaunchOptions", "merge_option_tokens", "prepare_options", "tokenize_options"]
