"""Invalidation pattern value object.

ONLY pattern matching - a predicate over cache keys used for bulk
invalidation, with literal, prefix, regex and custom predicate support.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from ..exceptions.invalid_pattern import InvalidPatternError


class PatternType(Enum):
    """Types of invalidation patterns supported."""
    
    LITERAL = "literal"     # Substring anywhere in the key
    PREFIX = "prefix"       # Key starts with the pattern
    REGEX = "regex"         # Regular expression search
    PREDICATE = "predicate" # Arbitrary callable


KeyPredicate = Callable[[str], bool]
PatternLike = Union[str, re.Pattern, "InvalidationPattern", KeyPredicate]


@dataclass(frozen=True)
class InvalidationPattern:
    """Invalidation pattern value object.
    
    Regex patterns are compiled when the pattern is created, so a malformed
    expression fails at the call site with ``InvalidPatternError``.
    """
    
    pattern: str
    pattern_type: PatternType
    _regex: Optional[re.Pattern] = field(default=None, repr=False, compare=False)
    _predicate: Optional[KeyPredicate] = field(default=None, repr=False, compare=False)
    
    @classmethod
    def literal(cls, substring: str) -> "InvalidationPattern":
        """Match keys containing ``substring``."""
        return cls(substring, PatternType.LITERAL)
    
    @classmethod
    def prefix(cls, prefix: str) -> "InvalidationPattern":
        """Match keys starting with ``prefix``."""
        return cls(prefix, PatternType.PREFIX)
    
    @classmethod
    def regex(cls, expression: str, flags: int = 0) -> "InvalidationPattern":
        """Match keys where ``expression`` is found (``re.search`` semantics)."""
        try:
            compiled = re.compile(expression, flags)
        except re.error as e:
            raise InvalidPatternError(expression, str(e)) from e
        return cls(expression, PatternType.REGEX, _regex=compiled)
    
    @classmethod
    def compiled(cls, regex: re.Pattern) -> "InvalidationPattern":
        """Wrap an already compiled regular expression."""
        return cls(regex.pattern, PatternType.REGEX, _regex=regex)
    
    @classmethod
    def predicate(cls, func: KeyPredicate, description: str = "") -> "InvalidationPattern":
        """Match keys for which ``func(key)`` is true."""
        name = description or getattr(func, "__name__", "predicate")
        return cls(name, PatternType.PREDICATE, _predicate=func)
    
    @classmethod
    def coerce(cls, pattern: PatternLike) -> "InvalidationPattern":
        """Normalize the accepted pattern shapes.
        
        Strings are literal substrings, compiled regexes match with
        ``search`` and callables are used as predicates.
        """
        if isinstance(pattern, InvalidationPattern):
            return pattern
        if isinstance(pattern, str):
            return cls.literal(pattern)
        if isinstance(pattern, re.Pattern):
            return cls.compiled(pattern)
        if callable(pattern):
            return cls.predicate(pattern)
        raise InvalidPatternError(repr(pattern), f"unsupported pattern type {type(pattern).__name__}")
    
    def matches(self, cache_key: str) -> bool:
        """Check if cache key matches this pattern."""
        if self.pattern_type == PatternType.LITERAL:
            return self.pattern in cache_key
        
        elif self.pattern_type == PatternType.PREFIX:
            return cache_key.startswith(self.pattern)
        
        elif self.pattern_type == PatternType.REGEX:
            return self._regex.search(cache_key) is not None
        
        elif self.pattern_type == PatternType.PREDICATE:
            return bool(self._predicate(cache_key))
        
        return False
    
    def __call__(self, cache_key: str) -> bool:
        return self.matches(cache_key)
    
    def __str__(self) -> str:
        """String representation."""
        return f"{self.pattern_type.value}:'{self.pattern}'"
