"""
JavaScript / TypeScript code extractor (JSX and TSX included)
"""
from codeflow.extractors.base_extractor import BaseExtractor
from codeflow.models.file_analysis import (
    CallInfo,
    EndpointInfo,
    FileAnalysis,
    FunctionInfo,
    ImportInfo,
)

FUNCTION_DECLARATIONS = {'function_declaration', 'generator_function_declaration'}

# Initializers that turn `const name = ...` into a function definition
FUNCTION_VALUES = {'arrow_function', 'function_expression', 'function', 'generator_function'}

# Call/return extraction never descends past these
FUNCTION_BOUNDARIES = FUNCTION_DECLARATIONS | FUNCTION_VALUES | {'method_definition'}

VARIABLE_DECLARATIONS = {'lexical_declaration', 'variable_declaration'}

JSX_TAGS = {'jsx_opening_element', 'jsx_self_closing_element'}

ROUTE_METHODS = ('get', 'post', 'put', 'delete', 'patch')


class JavascriptExtractor(BaseExtractor):
    """Extract functions, imports and endpoints from JS/TS syntax trees"""

    def extract(self, root_node, source_code, filepath):
        """Extract module-level definitions and imports"""
        functions = []
        imports = []

        def walk(node):
            # Function values only reach here as `export default function name() {}`
            if node.type in FUNCTION_DECLARATIONS or node.type in FUNCTION_VALUES:
                name_node = node.child_by_field_name('name')
                if not name_node:
                    return
                functions.append(self._function_info(
                    self.node_text(name_node, source_code), node, node, source_code
                ))

            elif node.type in VARIABLE_DECLARATIONS:
                for declarator in node.named_children:
                    if declarator.type != 'variable_declarator':
                        continue
                    name_node = declarator.child_by_field_name('name')
                    value_node = declarator.child_by_field_name('value')
                    if not name_node or name_node.type != 'identifier':
                        continue
                    if not value_node or value_node.type not in FUNCTION_VALUES:
                        continue
                    functions.append(self._function_info(
                        self.node_text(name_node, source_code), declarator, value_node, source_code
                    ))

            elif node.type == 'import_statement':
                import_info = self._import_info(node, source_code)
                if import_info:
                    imports.append(import_info)

            # Only module scope registers definitions
            elif node.type in ('program', 'export_statement'):
                for child in node.children:
                    walk(child)

        walk(root_node)

        return FileAnalysis(
            path=filepath,
            functions=functions,
            imports=imports,
            endpoints=self.find_endpoints(root_node, source_code),
        )

    def _function_info(self, name, bounds_node, func_node, source_code):
        return FunctionInfo(
            name=name,
            start_line=self.start_line(bounds_node),
            end_line=self.end_line(bounds_node),
            calls=self.find_calls(func_node, source_code),
            returns=self.find_returns(func_node, source_code),
        )

    def _import_info(self, node, source_code):
        source_node = node.child_by_field_name('source')
        if not source_node or source_node.type != 'string':
            return None

        import_info = ImportInfo(module_specifier=self._string_value(source_node, source_code))

        clause = next((c for c in node.named_children if c.type == 'import_clause'), None)
        if not clause:
            return import_info

        for child in clause.named_children:
            if child.type == 'identifier':
                import_info.default_import = self.node_text(child, source_code)
            elif child.type == 'named_imports':
                for specifier in child.named_children:
                    if specifier.type != 'import_specifier':
                        continue
                    local_node = specifier.child_by_field_name('alias') or specifier.child_by_field_name('name')
                    if local_node:
                        import_info.named_imports.append(self.node_text(local_node, source_code))

        return import_info

    def find_calls(self, func_node, source_code):
        """Find calls and JSX component usages in a function body"""
        calls = []

        # Explicit stack: generated code nests expressions deeper than the recursion limit
        stack = list(reversed(func_node.children))
        while stack:
            node = stack.pop()
            if node.type in FUNCTION_BOUNDARIES:
                continue

            if node.type == 'call_expression':
                # sql`...` parses as a call whose arguments are a template string
                args_node = node.child_by_field_name('arguments')
                called_name = self._callee_name(node.child_by_field_name('function'), source_code)
                if called_name and args_node and args_node.type == 'arguments':
                    calls.append(CallInfo(name=called_name, line=self.start_line(node)))

            elif node.type in JSX_TAGS:
                tag_node = node.child_by_field_name('name')
                if tag_node and tag_node.type in ('identifier', 'jsx_identifier'):
                    calls.append(CallInfo(
                        name=self.node_text(tag_node, source_code),
                        line=self.start_line(node),
                    ))

            stack.extend(reversed(node.children))

        return calls

    def find_returns(self, func_node, source_code):
        """Find return statement lines in a function body"""
        # const add = (a, b) => a + b;
        if func_node.type == 'arrow_function':
            body = func_node.child_by_field_name('body')
            if body and body.type != 'statement_block':
                return [self.start_line(body)]

        returns = []
        stack = list(reversed(func_node.children))
        while stack:
            node = stack.pop()
            if node.type == 'return_statement':
                returns.append(self.start_line(node))
            if node.type in FUNCTION_BOUNDARIES:
                continue
            stack.extend(reversed(node.children))

        return returns

    def find_endpoints(self, root_node, source_code):
        """Find router.<method>('/path', handler) registrations"""
        endpoints = []
        stack = [root_node]
        while stack:
            node = stack.pop()
            if node.type == 'call_expression':
                endpoint = self._route_registration(node, source_code)
                if endpoint:
                    endpoints.append(endpoint)
            stack.extend(reversed(node.children))

        return endpoints

    def _route_registration(self, call_node, source_code):
        callee = call_node.child_by_field_name('function')
        if not callee or callee.type != 'member_expression':
            return None

        property_node = callee.child_by_field_name('property')
        if not property_node or property_node.type != 'property_identifier':
            return None
        method = self.node_text(property_node, source_code)
        if method not in ROUTE_METHODS:
            return None

        args_node = call_node.child_by_field_name('arguments')
        if not args_node or args_node.type != 'arguments':
            return None
        args = [a for a in args_node.named_children if a.type != 'comment']
        if len(args) < 2:
            return None

        path_arg, handler_arg = args[0], args[1]
        if path_arg.type != 'string' or handler_arg.type != 'identifier':
            return None

        return EndpointInfo(
            method=method,
            path=self._string_value(path_arg, source_code),
            handler=self.node_text(handler_arg, source_code),
            line=self.start_line(call_node),
        )

    def _callee_name(self, callee, source_code):
        if not callee:
            return None
        if callee.type == 'identifier':
            return self.node_text(callee, source_code)
        # obj.method() -> 'method'
        if callee.type == 'member_expression':
            property_node = callee.child_by_field_name('property')
            if property_node and property_node.type == 'property_identifier':
                return self.node_text(property_node, source_code)
        return None

    def _string_value(self, string_node, source_code):
        """Cooked value of a string literal: '/a\\'b' -> /a'b"""
        parts = []
        for child in string_node.named_children:
            text = self.node_text(child, source_code)
            if child.type == 'escape_sequence':
                parts.append(_unescape(text))
            else:
                parts.append(text)
        return ''.join(parts)


SIMPLE_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', 'b': '\b', 'f': '\f', 'v': '\v', '0': '\0'}


def _unescape(sequence):
    body = sequence[1:]
    # Line continuation
    if body[0] in '\r\n\u2028\u2029':
        return ''
    if body.startswith('u{'):
        return chr(int(body[2:-1], 16))
    if body[0] in 'ux' and len(body) > 1:
        return chr(int(body[1:], 16))
    if body[0] in '01234567' and len(body) > 1:
        return chr(int(body, 8))
    return SIMPLE_ESCAPES.get(body, body)
