"""Selection set composition for fetch-by-id queries.

The builder is a textual composition step, not a schema-aware
compiler: caller-supplied fragments are forwarded verbatim and any
unknown field is reported by the server. Use ``SelectionValidator``
in front of it for a local schema check.
"""

import re

from fetchql.core.entities.field_spec import DEFAULT_FIELD_SPEC, Field, FieldSpec

# Braces are structural; commas and whitespace separate tokens,
# as they do in GraphQL selection sets.
_TOKEN_RE = re.compile(r"[{}]|[^\s,{}]+")

# Strings, comments and arguments may hold separators that matter;
# fragments containing them are not normalized.
_OPAQUE_CHARS = frozenset('"#(')

BY_ID_QUERY_TEMPLATE = "query ($id: ID!) {{ {root}(id: $id) {{ {selection} }} }}"


class SelectionSyntaxError(ValueError):
    """Raised when a selection fragment has unbalanced braces."""

    pass


def parse_fields(text: str) -> tuple[Field, ...]:
    """Parse a selection fragment into an ordered field tree.

    Args:
        text: Fragment such as ``"id,name,origin{id,name}"``.

    Returns:
        The top-level fields in order.

    Raises:
        SelectionSyntaxError: If braces are unbalanced or a sub-selection
            has no field to attach to.
    """
    tokens = _TOKEN_RE.findall(text)
    fields, position = _parse_level(tokens, 0, depth=0)
    if position != len(tokens):
        raise SelectionSyntaxError(f"Unexpected '}}' in selection: {text!r}")
    return fields


def _parse_level(
    tokens: list[str], position: int, depth: int
) -> tuple[tuple[Field, ...], int]:
    fields: list[Field] = []
    while position < len(tokens):
        token = tokens[position]
        if token == "}":
            if depth == 0:
                return tuple(fields), position
            return tuple(fields), position + 1
        if token == "{":
            if not fields or fields[-1].selection:
                raise SelectionSyntaxError("Sub-selection without a field name")
            children, position = _parse_level(tokens, position + 1, depth + 1)
            fields[-1] = Field(fields[-1].name, children)
            continue
        fields.append(Field(token))
        position += 1

    if depth > 0:
        raise SelectionSyntaxError("Unclosed '{' in selection")
    return tuple(fields), position


class SelectionBuilder:
    """Turns a caller-supplied field specification into a FieldSpec.

    Pure; holds no state beyond the default it substitutes.
    """

    def __init__(self, default: FieldSpec = DEFAULT_FIELD_SPEC) -> None:
        """Initialize the builder.

        Args:
            default: Specification used when the caller supplies none.
        """
        self._default = default

    @property
    def default(self) -> FieldSpec:
        """Get the default field specification."""
        return self._default

    def build(self, raw_spec: str | None) -> FieldSpec:
        """Build the field specification for a request.

        Args:
            raw_spec: Comma-separated field tokens, braces allowed for
                nesting. None, empty or whitespace selects the default.

        Returns:
            The field specification to embed in the query.
        """
        if raw_spec is None or not raw_spec.strip():
            return self._default

        text = raw_spec.strip()
        if _OPAQUE_CHARS.intersection(text):
            return FieldSpec(text=text)
        try:
            fields = parse_fields(text)
        except SelectionSyntaxError:
            # Forwarded as-is; the server reports the syntax error.
            fields = ()
        return FieldSpec(text=text, fields=fields)

    def compose(self, field_spec: FieldSpec, root_field: str = "character") -> str:
        """Compose the fetch-by-id query for a field specification.

        Args:
            field_spec: The specification to embed.
            root_field: The query root field taking the ``id`` argument.

        Returns:
            Query text of the form
            ``query ($id: ID!) { <root>(id: $id) { <fields> } }``.
        """
        return BY_ID_QUERY_TEMPLATE.format(root=root_field, selection=field_spec.text)
