"""Tests for the tree-sitter syntax adapter."""

from __future__ import annotations

import pytest

from typekeep.syntax import (
    ObjectTypeLiteral,
    OtherStatement,
    OtherType,
    TypeReference,
    VariableStatement,
    parse,
    type_of_initializer,
)


def _only_variable(text: str) -> VariableStatement:
    stmts = [s for s in parse(text).statements if isinstance(s, VariableStatement)]
    assert len(stmts) == 1
    return stmts[0]


# ── Statement kinds ──────────────────────────────────────────────────


class TestStatementKinds:
    def test_export_declare_const(self):
        stmt = _only_variable("export declare const components: AnyComponents;")
        assert stmt.exported
        assert stmt.ambient
        assert stmt.keyword == "const"
        assert [b.name for b in stmt.bindings] == ["components"]

    def test_export_const_is_not_ambient(self):
        stmt = _only_variable("export const api = anyApi;")
        assert stmt.exported
        assert not stmt.ambient

    def test_declare_without_export(self):
        stmt = _only_variable("declare const fullApi: ApiFromModules<{}>;")
        assert stmt.ambient
        assert not stmt.exported

    def test_plain_let_and_var(self):
        doc = parse("let a = 1;\nvar b = 2;\n")
        stmts = list(doc.variable_statements())
        assert [s.keyword for s in stmts] == ["let", "var"]
        assert not any(s.exported or s.ambient for s in stmts)

    def test_other_statements_are_kept_opaque(self):
        doc = parse(
            'import type { AnyComponents } from "convex/server";\n'
            "// a comment\n"
            "export function f() { const components = 1; }\n"
            "export type T = { a: string };\n"
        )
        assert doc.statements
        assert all(isinstance(s, OtherStatement) for s in doc.statements)

    def test_multiple_declarators(self):
        stmt = _only_variable("export declare const a: A, b: B;")
        assert [b.name for b in stmt.bindings] == ["a", "b"]

    def test_destructuring_is_skipped(self):
        stmt = _only_variable("export const { a, b } = obj;")
        assert stmt.bindings == ()

    def test_statement_order_preserved(self, real_dts):
        doc = parse(real_dts)
        names = [b.name for s in doc.variable_statements() for b in s.bindings]
        assert names == ["fullApi", "api", "internal", "components"]


# ── Type expressions ─────────────────────────────────────────────────


class TestTypeExpressions:
    def _type_of(self, text: str):
        return _only_variable(text).bindings[0].type_annotation

    def test_bare_reference(self):
        t = self._type_of("export declare const c: AnyComponents;")
        assert isinstance(t, TypeReference)
        assert t.name == "AnyComponents"
        assert t.qualifier is None

    def test_qualified_reference(self):
        t = self._type_of("export declare const c: convex.AnyComponents;")
        assert isinstance(t, TypeReference)
        assert t.name == "AnyComponents"
        assert t.qualifier == "convex"

    def test_generic_reference_keeps_terminal_name(self):
        t = self._type_of("export declare const c: ComponentTypes<MyApp>;")
        assert isinstance(t, TypeReference)
        assert t.name == "ComponentTypes"

    def test_object_literal(self):
        t = self._type_of("export declare const c: { a: string; b: number };")
        assert isinstance(t, ObjectTypeLiteral)
        assert t.member_count == 2

    def test_empty_object_literal(self):
        t = self._type_of("export declare const c: {};")
        assert isinstance(t, ObjectTypeLiteral)
        assert t.member_count == 0

    @pytest.mark.parametrize("annotation", ["string", "A | B", "string[]", "typeof x", "(AnyComponents)"])
    def test_other_types(self, annotation):
        t = self._type_of(f"export declare const c: {annotation};")
        assert isinstance(t, OtherType)

    def test_missing_annotation(self):
        binding = _only_variable("export declare const components;").bindings[0]
        assert binding.type_annotation is None
        assert binding.initializer is None

    def test_initializer_is_kept(self):
        binding = _only_variable("export const components = componentsGeneric();").bindings[0]
        assert binding.type_annotation is None
        assert binding.initializer is not None
        assert binding.initializer.node.text == "componentsGeneric()"

    def test_byte_offsets_point_at_annotation(self):
        text = "export declare const components: AnyComponents;"
        t = self._type_of(text)
        assert text.encode()[t.node.start:t.node.end] == b"AnyComponents"


# ── Initializer types ────────────────────────────────────────────────


class TestInitializerTypes:
    def _initializer_type(self, text: str):
        return type_of_initializer(_only_variable(text).bindings[0].initializer)

    def test_as_expression(self):
        t = self._initializer_type("export const c = componentsGeneric() as AnyComponents;")
        assert isinstance(t, TypeReference)
        assert t.name == "AnyComponents"

    def test_satisfies_expression(self):
        t = self._initializer_type("export const c = make() satisfies { a: string };")
        assert isinstance(t, ObjectTypeLiteral)

    def test_parenthesized_as_expression(self):
        t = self._initializer_type("export const c = (make() as convex.AnyComponents);")
        assert isinstance(t, TypeReference)
        assert t.qualifier == "convex"

    def test_as_const_has_no_type(self):
        assert self._initializer_type("export const c = [1, 2] as const;") is None

    def test_plain_call_has_no_type(self):
        assert self._initializer_type("export const c = componentsGeneric();") is None

    def test_no_initializer(self):
        assert type_of_initializer(None) is None


# ── Error tolerance ──────────────────────────────────────────────────


class TestErrorTolerance:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "export declare const components: {",
            "}}}}{{{{ ;;; export",
            "export declare const components: AnyComponents = = ;",
            "\x00\x01\x02",
            "export declare const c\ud800: X;",
        ],
    )
    def test_never_raises(self, text):
        parse(text)

    def test_non_string_input(self):
        assert parse(None).statements == ()  # type: ignore[arg-type]

    def test_broken_statement_is_opaque(self):
        doc = parse("export declare const components: { a: ;\n")
        assert not any(b.name == "components" for s in doc.variable_statements() for b in s.bindings)

    def test_valid_statements_survive_a_broken_one(self):
        doc = parse(
            "export declare const api: Api;\n"
            "export declare const broken: { a: ;\n"
        )
        names = [b.name for s in doc.variable_statements() for b in s.bindings]
        assert "api" in names

    def test_deeply_nested_type_keeps_statement_flags(self):
        depth = 3000
        text = "export declare const components: " + "{ a: " * depth + "{}" + " }" * depth + ";\n"
        doc = parse(text)
        (stmt,) = list(doc.variable_statements())
        assert stmt.exported and stmt.ambient
        (binding,) = stmt.bindings
        assert binding.name == "components"
        assert binding.type_annotation is None
