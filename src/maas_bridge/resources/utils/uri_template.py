"""URI template matching for resource URIs.

Templates look like ``maas://machine/{system_id}/details``. Query strings
are not part of a template; their parameters are merged into the extracted
variables.
"""

import re
from typing import Dict, List, Optional
from urllib.parse import parse_qsl, unquote, urlsplit

_VARIABLE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class UriTemplate:
    """Compiled URI template."""
    
    def __init__(self, template: str):
        self.template = template
        self.variables: List[str] = _VARIABLE.findall(template)
        self._regex = re.compile(self._compile(template))
    
    @staticmethod
    def _compile(template: str) -> str:
        parts = []
        position = 0
        for match in _VARIABLE.finditer(template):
            parts.append(re.escape(template[position:match.start()]))
            parts.append(f"(?P<{match.group(1)}>[^/?#]+)")
            position = match.end()
        parts.append(re.escape(template[position:]))
        return "".join(parts)
    
    def match(self, uri: str) -> Optional[Dict[str, str]]:
        """Match a URI and extract its variables.
        
        Returns:
            Path variables merged over the first value of each query
            parameter, or None when the URI does not match or is malformed
        """
        try:
            parts = urlsplit(uri)
        except ValueError:
            return None
        base = uri.split("?", 1)[0].split("#", 1)[0]
        found = self._regex.fullmatch(base)
        if found is None:
            return None
        
        variables: Dict[str, str] = {}
        for name, value in parse_qsl(parts.query, keep_blank_values=True):
            variables.setdefault(name, value)
        for name, value in found.groupdict().items():
            variables[name] = unquote(value)
        return variables
    
    def __repr__(self) -> str:
        return f"UriTemplate({self.template!r})"
