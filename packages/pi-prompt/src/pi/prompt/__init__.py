"""pi-prompt: shell-aware colored prompt rendering."""

# Color resolution
from pi.prompt.colors import COLOR_NAMES, TRANSPARENT, parse_hex, resolve_color

# Configuration
from pi.prompt.config import PromptConfig, load_config

# Shell dialects and their escape templates
from pi.prompt.formats import Formats, Shell, get_formats

# Markup parsing
from pi.prompt.markup import ColoredText, parse_markup

# Rendering
from pi.prompt.renderer import Renderer

# Terminal interface and implementation
from pi.prompt.terminal import ProcessTerminal, Terminal

# Width measurement
from pi.prompt.width import strip_ansi, visible_width

__all__ = [
    # Colors
    "COLOR_NAMES",
    "TRANSPARENT",
    "parse_hex",
    "resolve_color",
    # Config
    "PromptConfig",
    "load_config",
    # Formats
    "Formats",
    "Shell",
    "get_formats",
    # Markup
    "ColoredText",
    "parse_markup",
    # Renderer
    "Renderer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Width
    "strip_ansi",
    "visible_width",
]
