"""Enumerations for formlocalizer type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so the persisted name of a member
is exactly ``str(member)`` and parsing is ``TemplateUsage(name)``.

Python 3.13+.
"""

from enum import StrEnum

from formlocalizer.constants import (
    RECORD_CULTURE,
    RECORD_LIST,
    RECORD_TEMPLATE,
    RECORD_VALUE,
)


class RecordType(StrEnum):
    """Type prefix of a persisted record key.

    StrEnum provides automatic string conversion: str(RecordType.VALUE) == "VALUE"
    """

    CULTURE = RECORD_CULTURE
    """Locale identifier of the store: CULTURE; -> en-US"""

    VALUE = RECORD_VALUE
    """Scalar translation: VALUE;<key> -> text"""

    LIST = RECORD_LIST
    """List translation: LIST;<key> -> term;term;..."""

    TEMPLATE = RECORD_TEMPLATE
    """Shared patterns: TEMPLATE;<usage>;<field>;... -> pattern;pattern;..."""


class TemplateUsage(StrEnum):
    """Situation in a form dialog where a template's patterns are used.

    The value of every member equals its name, which is the identifier
    written to TEMPLATE records. The mapping is total and reversible:
    ``TemplateUsage(str(usage)) is usage`` for every member.
    """

    NONE = "None"
    BOOL = "Bool"
    BOOL_HELP = "BoolHelp"
    CLARIFY = "Clarify"
    CONFIRMATION = "Confirmation"
    CURRENT_CHOICE = "CurrentChoice"
    DATE_TIME = "DateTime"
    DATE_TIME_HELP = "DateTimeHelp"
    DOUBLE = "Double"
    DOUBLE_HELP = "DoubleHelp"
    ENUM_MANY_NUMBER_HELP = "EnumManyNumberHelp"
    ENUM_ONE_NUMBER_HELP = "EnumOneNumberHelp"
    ENUM_MANY_WORD_HELP = "EnumManyWordHelp"
    ENUM_ONE_WORD_HELP = "EnumOneWordHelp"
    ENUM_SELECT_ONE = "EnumSelectOne"
    ENUM_SELECT_MANY = "EnumSelectMany"
    FEEDBACK = "Feedback"
    HELP = "Help"
    HELP_CLARIFY = "HelpClarify"
    HELP_CONFIRM = "HelpConfirm"
    HELP_NAVIGATION = "HelpNavigation"
    INTEGER = "Integer"
    INTEGER_HELP = "IntegerHelp"
    NAVIGATION = "Navigation"
    NAVIGATION_COMMAND_HELP = "NavigationCommandHelp"
    NAVIGATION_FORMAT = "NavigationFormat"
    NAVIGATION_HELP = "NavigationHelp"
    NO_PREFERENCE = "NoPreference"
    NOT_UNDERSTOOD = "NotUnderstood"
    STATUS_FORMAT = "StatusFormat"
    STRING = "String"
    STRING_HELP = "StringHelp"
    UNSPECIFIED = "Unspecified"


__all__ = [
    "RecordType",
    "TemplateUsage",
]
