"""
Java-specific naming utilities.

Holds the reserved keywords that generated class and constant names must avoid.
"""

from ...core.naming import NameValidator


# Java reserved keywords and literals
JAVA_RESERVED_KEYWORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "record",
        "return",
        "sealed",
        "static",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "var",
        "void",
        "volatile",
        "while",
    }
)


def create_java_validator() -> NameValidator:
    """Create a name validator configured for Java."""
    return NameValidator(JAVA_RESERVED_KEYWORDS, "Java")
