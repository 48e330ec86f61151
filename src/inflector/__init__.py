"""English inflection rules and identifier naming conventions.

Pluralizes and singularizes words through an ordered, editable rule registry
and converts between the naming styles used for classes, tables, attributes
and foreign keys.
"""

__version__ = "0.1.0"

from inflector.Import import (
    ConstantizeError,
    InvalidNamespacePathError,
    SymbolNotFoundError,
)
from inflector.Inflections import Inflections, Rule, get_inflections
from inflector.Strings import (
    camelize,
    classify,
    constantize,
    dasherize,
    deconstantize,
    demodulize,
    foreign_key,
    humanize,
    ordinal,
    ordinalize,
    pluralize,
    singularize,
    tableize,
    titleize,
    underscore,
)
