import re
from typing import Optional, Union

from inflector.Environment import env
from inflector.Import import (
    SymbolResolver,
    resolve_namespaced_symbol,
    split_namespace_path,
)
from inflector.Inflections import Inflections, get_inflections


def _registry(inflections: Optional[Inflections]) -> Inflections:
    return get_inflections() if inflections is None else inflections


def _separator() -> str:
    return env("INFLECTOR_NAMESPACE_SEPARATOR")


def pluralize(word: str, inflections: Optional[Inflections] = None) -> str:
    """
    Return the plural form of ``word``.

    Rules are tried from the most recently registered to the oldest; the first
    one that matches wins. Uncountable words, and words no rule matches, come
    back unchanged.

        >>> pluralize("post")
        'posts'
        >>> pluralize("octopus")
        'octopi'
        >>> pluralize("sheep")
        'sheep'
        >>> pluralize("CamelOctopus")
        'CamelOctopi'
    """
    return _registry(inflections).pluralize(word)


def singularize(word: str, inflections: Optional[Inflections] = None) -> str:
    """
    Return the singular form of ``word``.

        >>> singularize("posts")
        'post'
        >>> singularize("people")
        'person'
    """
    return _registry(inflections).singularize(word)


def camelize(word: str, upper_first: bool = True) -> str:
    """
    Convert an underscored path to CamelCase.

    "/" turns into the namespace separator, so paths map onto nested names.
    With ``upper_first=False`` only the very first character is lowercased.

        >>> camelize("active_record/errors")
        'ActiveRecord::Errors'
        >>> camelize("active_record/errors", False)
        'activeRecord::Errors'
    """
    separator = _separator()
    result = re.sub(r"/(.?)", lambda m: separator + m.group(1).upper(), word)
    result = re.sub(r"(?:^|_)(.)", lambda m: m.group(1).upper(), result)
    if not upper_first:
        result = result[:1].lower() + result[1:]
    return result


def underscore(word: str) -> str:
    """
    Convert a CamelCase name to its underscored, lowercase form.

    The namespace separator becomes "/" and dashes become underscores.

        >>> underscore("ActiveRecord::Errors")
        'active_record/errors'
        >>> underscore("HTMLTidyGenerator")
        'html_tidy_generator'
    """
    result = word.replace(_separator(), "/")
    result = re.sub(r"([A-Z\d]+)([A-Z][a-z])", r"\1_\2", result)
    result = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", result)
    result = result.replace("-", "_")
    return result.lower()


def dasherize(word: str) -> str:
    """Replace underscores with dashes."""
    return word.replace("_", "-")


def humanize(word: str) -> str:
    """
    Turn an attribute name into something readable.

    A trailing "_id" is dropped, underscores become spaces and the first
    character is upper-cased. The case of everything else is left alone.

        >>> humanize("employee_salary")
        'Employee salary'
        >>> humanize("author_id")
        'Author'
    """
    result = re.sub(r"_id$", "", word)
    result = result.replace("_", " ")
    return result[:1].upper() + result[1:]


def titleize(word: str) -> str:
    """
    Capitalize every word, for use in titles.

        >>> titleize("man from the boondocks")
        'Man From The Boondocks'
        >>> titleize("TheManWithoutAPast")
        'The Man Without A Past'
    """
    result = humanize(underscore(word))
    return re.sub(r"\b('?[a-z])", lambda m: m.group(1).capitalize(), result)


def demodulize(name: str) -> str:
    """Drop the namespace from a qualified name: "Admin::Post" -> "Post"."""
    return name.rpartition(_separator())[2]


def deconstantize(name: str) -> str:
    """Keep only the namespace of a qualified name: "Admin::Post" -> "Admin"."""
    return name.rpartition(_separator())[0]


def tableize(name: str, inflections: Optional[Inflections] = None) -> str:
    """
    Build a table name from a class name.

        >>> tableize("RawScaledScorer")
        'raw_scaled_scorers'
    """
    return pluralize(underscore(name), inflections)


def classify(table_name: str, inflections: Optional[Inflections] = None) -> str:
    """
    Build a class name from a table name.

    A schema prefix ("schema.table") is dropped first. The name is singularized
    as-is, so an already singular word ending in "s" loses it:

        >>> classify("egg_and_hams")
        'EggAndHam'
        >>> classify("calculus")
        'Calculu'
    """
    name = re.sub(r".*\.", "", table_name)
    return camelize(singularize(name, inflections))


def foreign_key(class_name: str, separate_with_underscore: bool = True) -> str:
    """
    Build a foreign key column name from a class name.

        >>> foreign_key("Message")
        'message_id'
        >>> foreign_key("Message", False)
        'messageid'
        >>> foreign_key("Admin::Post")
        'post_id'
    """
    suffix = "_id" if separate_with_underscore else "id"
    return underscore(demodulize(class_name)) + suffix


def ordinal(number: Union[int, str]) -> str:
    """
    Return the suffix that marks ``number`` as a position: "st", "nd", "rd" or "th".
    """
    number = abs(int(number))
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def ordinalize(number: Union[int, str]) -> str:
    """
    Append the ordinal suffix to the number as written.

        >>> ordinalize(1)
        '1st'
        >>> ordinalize("1003")
        '1003rd'
        >>> ordinalize(112)
        '112th'
    """
    return f"{number}{ordinal(number)}"


def constantize(name: str, resolver: Optional[SymbolResolver] = None):
    """
    Look up the object a namespaced name refers to.

    The name is split on the namespace separator and the segments are handed to
    ``resolver``. Without a resolver the segments are resolved against Python
    modules (see :func:`inflector.Import.resolve_namespaced_symbol`).

    Raises:
        InvalidNamespacePathError: the name has no usable segments
        SymbolNotFoundError: the resolver could not find a segment
    """
    segments = split_namespace_path(name, _separator())
    if resolver is None:
        resolver = resolve_namespaced_symbol
    return resolver(segments)
