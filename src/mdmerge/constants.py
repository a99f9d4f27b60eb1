from __future__ import annotations

"""Project-wide constants used across modules.

Defaults for the input tree, the merged output and the tokenizer model. The
CLI layers flags and environment variables on top of these.
"""

# Horizontal rule between merged documents.
DEFAULT_SEPARATOR: str = '\n\n---\n\n'

MARKDOWN_SUFFIXES: tuple[str, ...] = ('.md',)

DEFAULT_INPUT_DIR: str = './input'
DEFAULT_OUTPUT_PATH: str = './output/nuxt3-docs-merged-latest.md'
DEFAULT_MODEL: str = 'gpt-4'

TEXT_ENCODING: str = 'utf-8'
