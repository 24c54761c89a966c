"""
CSS custom-property access for display themes.

Themes only carry a ``:root`` block of ``--name: value;`` declarations, so
this is a small regex reader rather than a CSS engine.
"""
import re
from typing import Dict, Optional

from .colour import parse_colour_hex
from .models import Colour
from .theme_loader import get_css


class CSSParser:
    """
    Reads ``:root`` custom properties out of a theme.

    Pass ``css_content`` to parse a stylesheet that isn't a packaged theme.
    """
    
    def __init__(self, theme: str = "classic", css_content: Optional[str] = None):
        self.theme = theme
        self.css_content = css_content if css_content is not None else get_css(theme)
        self._css_vars = None
    
    def get_css_variables(self) -> Dict[str, str]:
        """Extract all CSS variables from :root section. Cached for performance."""
        if self._css_vars is not None:
            return self._css_vars
            
        # Comments may contain colons and semicolons
        css = re.sub(r'/\*.*?\*/', '', self.css_content, flags=re.DOTALL)

        root_match = re.search(r':root\s*\{([^}]+)\}', css, re.DOTALL)
        if not root_match:
            raise ValueError(f"No :root section found in theme '{self.theme}'")
        
        variable_pattern = r'--([^:]+):\s*([^;]+);'
        css_vars = re.findall(variable_pattern, root_match.group(1))
        self._css_vars = {name.strip(): value.strip() for name, value in css_vars}
        
        return self._css_vars
    
    def has_variable(self, variable_name: str) -> bool:
        return variable_name in self.get_css_variables()

    def get_raw_value(self, variable_name: str) -> str:
        """Get raw CSS variable value."""
        value = self.get_css_variables().get(variable_name)
        if not value:
            raise ValueError(f"CSS variable '--{variable_name}' not found in theme '{self.theme}'")
        return value
    
    def get_float_value(self, variable_name: str) -> float:
        """Get a unitless number from a CSS variable."""
        value = self.get_raw_value(variable_name)
        try:
            return float(value)
        except ValueError:
            raise ValueError(
                f"CSS variable '--{variable_name}' is not a number in theme '{self.theme}': {value}"
            ) from None

    def get_int_value(self, variable_name: str) -> int:
        value = self.get_float_value(variable_name)
        if not value.is_integer():
            raise ValueError(
                f"CSS variable '--{variable_name}' is not an integer in theme '{self.theme}': {value}"
            )
        return int(value)

    def get_colour(self, variable_name: str) -> Colour:
        """Get a hex colour variable, decoded to linear RGBA."""
        return parse_colour_hex(self.get_raw_value(variable_name))
