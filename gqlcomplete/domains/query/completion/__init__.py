"""GraphQL completion engine.

Provides schema-aware GraphQL autocompletion with:
- Position detection from an incremental parse of the document
- Type context reconstructed from the enclosing constructs
- Field, argument, input object field and literal suggestions
- Fragment type condition and fragment spread suggestions
- Variable type and directive suggestions
"""

from .completion import DEFINITION_KEYWORDS, get_autocomplete_suggestions, get_context
from .core import (
    ContextToken,
    Cursor,
    Suggestion,
    SuggestionType,
    TypeInfo,
    get_definition_state,
    get_field_def,
    hint_list,
    state_chain,
)
from .arguments import get_suggestions_for_arguments, get_suggestions_for_object_fields
from .directives import DIRECTIVE_LOCATIONS, can_use_directive, get_suggestions_for_directive
from .fields import get_suggestions_for_field_names
from .fragments import (
    get_fragment_definitions,
    get_suggestions_for_fragment_spread,
    get_suggestions_for_fragment_type_conditions,
)
from .token import BREAK, get_token_at_position, run_online_parser
from .type_info import get_type_info
from .values import get_suggestions_for_input_values
from .variables import get_suggestions_for_variable_definition

__all__ = [
    # Main API
    "get_autocomplete_suggestions",
    "get_context",
    # Types
    "ContextToken",
    "Cursor",
    "Suggestion",
    "SuggestionType",
    "TypeInfo",
    # Constants
    "BREAK",
    "DEFINITION_KEYWORDS",
    "DIRECTIVE_LOCATIONS",
    # Token location and type context
    "get_token_at_position",
    "run_online_parser",
    "get_type_info",
    # Generators
    "get_suggestions_for_field_names",
    "get_suggestions_for_arguments",
    "get_suggestions_for_object_fields",
    "get_suggestions_for_input_values",
    "get_suggestions_for_fragment_type_conditions",
    "get_suggestions_for_fragment_spread",
    "get_suggestions_for_variable_definition",
    "get_suggestions_for_directive",
    # Helper functions
    "can_use_directive",
    "get_definition_state",
    "get_field_def",
    "get_fragment_definitions",
    "hint_list",
    "state_chain",
]
