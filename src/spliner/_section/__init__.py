from ._section import Section, section
from ._section_derivative import section_derivative
from ._section_evaluate import section_contains, section_evaluate
from ._section_fit import section_fit

__all__ = [
    "Section",
    "section",
    "section_contains",
    "section_derivative",
    "section_evaluate",
    "section_fit",
]
