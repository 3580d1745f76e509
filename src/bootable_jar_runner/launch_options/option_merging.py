"""Merging of structured option lists with whitespace-delimited option strings."""

from __future__ import annotations

from collections.abc import Sequence

from .option_models import LaunchOptions


def tokenize_options(raw: str | None) -> tuple[str, ...]:
    """Split a raw option string on runs of whitespace.

    Quotes and escapes carry no meaning: `"-Dname=a b"` yields two tokens.
    """
    if not raw:
        return ()
    return tuple(raw.split())


def merge_option_tokens(values: Sequence[str], raw: str | None) -> tuple[str, ...]:
    """Append the tokens of `raw` after `values`, keeping both orders."""
    return (*values, *tokenize_options(raw))


def prepare_options(
    jvm_arguments: Sequence[str],
    jvm_arguments_props: str | None,
    arguments: Sequence[str],
    arguments_props: str | None,
) -> LaunchOptions:
    """Merge both (list, raw string) pairs into launch options."""
    return LaunchOptions(
        jvm_arguments=merge_option_tokens(jvm_arguments, jvm_arguments_props),
        arguments=merge_option_tokens(arguments, arguments_props),
    )
