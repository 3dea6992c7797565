"""Tests for variable definition type suggestions."""


class TestVariableTypeSuggestions:
    """Tests for suggestions after a variable name."""

    def test_variable_type_offers_input_types(self, suggest):
        """Only types usable as inputs should be offered."""
        completions = suggest("query Q($id: ")
        assert "ID" in completions
        assert "String" in completions
        assert "Boolean" in completions
        assert "Episode" in completions
        assert "ReviewInput" in completions
        assert "Human" not in completions
        assert "Character" not in completions
        assert "SearchResult" not in completions

    def test_partial_variable_type_filters(self, suggest):
        """Typing part of a type name should filter."""
        assert suggest("query Q($review: Rev") == ["ReviewInput"]

    def test_list_variable_type(self, suggest):
        """The element type of a list type should be completed."""
        assert suggest("query Q($episodes: [Ep") == ["Episode"]

    def test_open_list_variable_type(self, suggest):
        """An opening bracket should suggest every input type."""
        completions = suggest("query Q($episodes: [")
        assert "Episode" in completions
        assert "Droid" not in completions

    def test_second_variable_definition(self, suggest):
        """Later variable definitions should be completed the same way."""
        assert suggest("query Q($id: ID!, $verbose: Bool") == ["Boolean"]

    def test_type_description_is_attached(self, complete):
        """Suggestions carry the type description."""
        suggestions = {suggestion.text: suggestion for suggestion in complete("query Q($id: ")}
        assert suggestions["Boolean"].description is not None
        assert suggestions["Boolean"].description.startswith("The `Boolean` scalar type")
