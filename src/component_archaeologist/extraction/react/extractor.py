"""
Component extraction.

Given a detected component's function node, derive its full ComponentInfo:
props, hooks, rendered child components, size and the structural line
ranges of its body (state, effects, handlers, returned JSX).

Nothing here raises for missing features; an absent feature is an empty
list or None.
"""

from __future__ import annotations

from tree_sitter import Node

from component_archaeologist.extraction.models import ComponentInfo, LineRange, LineRanges
from component_archaeologist.extraction.typescript import (
    NodeKind,
    SourceFile,
    children_of,
    is_function_expression,
    is_markup,
    kind_of,
    walk,
)

from .components import DetectedComponent, function_body, infer_role, is_pascal_case

EFFECT_HOOKS = frozenset({"useEffect", "useLayoutEffect"})
_STATE_HOOK_SUFFIXES = ("State", "Reducer")

# Parameter wrappers of the TypeScript grammar
_PARAMETER_TYPES = {"required_parameter", "optional_parameter"}


def _first_child(node: Node | None) -> Node | None:
    if node is None:
        return None
    children = children_of(node)
    return children[0] if children else None


def _callee_name(call: Node, source: SourceFile) -> str | None:
    """Name of a call's callee when it is a bare identifier."""
    callee = call.child_by_field_name("function")
    if callee is None or kind_of(callee) is not NodeKind.IDENTIFIER:
        return None
    return source.text(callee)


def _first_parameter(func: Node) -> Node | None:
    # x => ... has a single bare parameter
    single = func.child_by_field_name("parameter")
    if single is not None:
        return single

    parameter = _first_child(func.child_by_field_name("parameters"))
    if parameter is None:
        return None

    if parameter.type in _PARAMETER_TYPES:
        parameter = parameter.child_by_field_name("pattern")
    if parameter is not None and parameter.type == "assignment_pattern":
        parameter = parameter.child_by_field_name("left")
    return parameter


def _binding_name(element: Node, source: SourceFile) -> str | None:
    """Bound name of one element of an object destructuring pattern."""
    if element.type == "shorthand_property_identifier_pattern":
        return source.text(element)

    if element.type == "object_assignment_pattern":
        left = element.child_by_field_name("left")
        if left is not None and left.type == "shorthand_property_identifier_pattern":
            return source.text(left)
        return None

    if element.type == "pair_pattern":
        value = element.child_by_field_name("value")
        if value is not None and value.type == "assignment_pattern":
            value = value.child_by_field_name("left")
        if value is not None and kind_of(value) is NodeKind.IDENTIFIER:
            return source.text(value)
        return None

    if element.type == "rest_pattern":
        target = _first_child(element)
        if target is not None and kind_of(target) is NodeKind.IDENTIFIER:
            return source.text(target)

    return None


def extract_prop_names(func: Node, source: SourceFile) -> list[str]:
    """
    Extract prop names from a component's first parameter.

    function Card({ title, onClick }) -> ["title", "onClick"]
    function Card(props)              -> ["props"]
    function Card()                   -> []

    Parameters beyond the first are ignored.
    """
    parameter = _first_parameter(func)
    if parameter is None:
        return []

    kind = kind_of(parameter)
    if kind is NodeKind.IDENTIFIER:
        return [source.text(parameter)]

    names: list[str] = []
    if kind is NodeKind.OBJECT_PATTERN:
        for element in children_of(parameter):
            name = _binding_name(element, source)
            if name:
                names.append(name)
    return names


def collect_hooks(body: Node, source: SourceFile) -> list[str]:
    """Collect hook calls (callee identifier starting with "use") with duplicates."""
    hooks: list[str] = []
    for node in walk(body):
        if kind_of(node) is NodeKind.CALL_EXPRESSION:
            name = _callee_name(node, source)
            if name and name.startswith("use"):
                hooks.append(name)
    return hooks


def collect_child_usages(body: Node, source: SourceFile) -> list[str]:
    """Collect capitalized JSX tag names in source order, one entry per usage."""
    usages: list[str] = []
    for node in walk(body):
        if kind_of(node) not in (NodeKind.JSX_OPENING_ELEMENT, NodeKind.JSX_SELF_CLOSING_ELEMENT):
            continue
        tag = node.child_by_field_name("name")
        # Member tags like <Foo.Bar> and fragments (no name) are skipped
        if tag is None or kind_of(tag) is not NodeKind.IDENTIFIER:
            continue
        tag_name = source.text(tag)
        if is_pascal_case(tag_name):
            usages.append(tag_name)
    return usages


def _unique(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def _is_state_statement(statement: Node, source: SourceFile) -> bool:
    """Match const [x, setX] = useState(...), useReducer(...), useFormState(...)."""
    if kind_of(statement) is not NodeKind.VARIABLE_STATEMENT:
        return False

    declarator = next(
        (c for c in children_of(statement) if kind_of(c) is NodeKind.VARIABLE_DECLARATOR), None
    )
    if declarator is None:
        return False

    initializer = declarator.child_by_field_name("value")
    if initializer is None or kind_of(initializer) is not NodeKind.CALL_EXPRESSION:
        return False

    name = _callee_name(initializer, source)
    return bool(name and name.startswith("use") and name.endswith(_STATE_HOOK_SUFFIXES))


def _is_handler_statement(statement: Node, func: Node) -> bool:
    kind = kind_of(statement)
    if kind is NodeKind.VARIABLE_STATEMENT:
        for declarator in children_of(statement):
            if kind_of(declarator) is not NodeKind.VARIABLE_DECLARATOR:
                continue
            value = declarator.child_by_field_name("value")
            if value is not None and is_function_expression(value):
                return True
        return False
    return kind is NodeKind.FUNCTION_DECLARATION and statement != func


def _effect_ranges(statement: Node, source: SourceFile) -> list[LineRange]:
    ranges: list[LineRange] = []
    for node in walk(statement):
        if kind_of(node) is NodeKind.CALL_EXPRESSION and _callee_name(node, source) in EFFECT_HOOKS:
            ranges.append(source.line_range(node))
    return ranges


def _returned_markup(statement: Node) -> tuple[bool, Node | None]:
    """
    Inspect a return statement.

    Returns:
        (has_expression, markup_node). markup_node is set only when the
        returned expression, after stripping one pair of parentheses, is
        itself a JSX element, self-closing element or fragment.
    """
    expression = _first_child(statement)
    if expression is None:
        return False, None

    target = expression
    if kind_of(target) is NodeKind.PARENTHESIZED_EXPRESSION:
        target = _first_child(target) or target

    return True, target if is_markup(target) else None


def collect_line_ranges(func: Node, source: SourceFile) -> LineRanges:
    """
    Compute the structural line ranges of a component body.

    Only the immediate statements of the body are classified; a concise
    arrow body counts as a single statement. Effects are the exception and
    are searched for at any depth inside each statement.

    The first return with a value ends only the search for returned JSX.
    Statements after it are still classified as state, effects or handlers,
    so hoisted handler functions declared below the return are reported.
    """
    ranges = LineRanges()
    body = function_body(func)
    if body is None:
        return ranges

    statements = children_of(body) if kind_of(body) is NodeKind.STATEMENT_BLOCK else [body]
    looking_for_jsx = True

    for statement in statements:
        if _is_state_statement(statement, source):
            current = source.line_range(statement)
            if ranges.state is None:
                ranges.state = current
            else:
                ranges.state.end = current.end

        ranges.effects.extend(_effect_ranges(statement, source))

        if _is_handler_statement(statement, func):
            ranges.handlers.append(source.line_range(statement))

        if looking_for_jsx and kind_of(statement) is NodeKind.RETURN_STATEMENT:
            has_expression, markup = _returned_markup(statement)
            if markup is not None:
                ranges.jsx = source.line_range(markup)
            if has_expression:
                # The first return with a value decides
                looking_for_jsx = False

    return ranges


def build_component_info(detected: DetectedComponent) -> ComponentInfo:
    """
    Build the full ComponentInfo record for a detected component.

    Args:
        detected: Output of the component detector

    Returns:
        ComponentInfo with props, hooks, children, size and line ranges
    """
    func = detected.node
    source = detected.source
    body = function_body(func)

    hooks: list[str] = []
    usages: list[str] = []
    if body is not None:
        hooks = collect_hooks(body, source)
        usages = collect_child_usages(body, source)

    return ComponentInfo(
        name=detected.name,
        file_path=source.relative_path,
        role=infer_role(f"/{source.relative_path}"),
        props=extract_prop_names(func, source),
        hooks=_unique(hooks),
        children=_unique(usages),
        loc=source.end_line(func) - source.start_line(func) + 1,
        complexity=None,
        line_ranges=collect_line_ranges(func, source),
        child_usages=usages,
    )
