import logging
from typing import Callable, Sequence, TextIO

from .errors import SinkWriteError
from .wire_format import WireType

_log = logging.getLogger(__name__)

INDENT_UNIT = "    "
COMMENT_MARKER = "// "

SUPPRESSED_LINTS = (
    "box_pointers",
    "dead_code",
    "missing_docs",
    "non_camel_case_types",
    "non_snake_case",
    "non_upper_case_globals",
    "trivial_casts",
    "unsafe_code",
    "unused_imports",
    "unused_results",
)

Body = Callable[["CodeWriter"], None]


class CodeWriter:
    """
    Writes Rust source code line by line into a text sink.

    Nested scopes are never entered by mutating this writer. Instead, the
    helpers that open a scope build a child writer which shares the sink
    but carries a longer prefix, and hand it to a callback:

        >>> w = CodeWriter(sys.stdout)
        >>> w.pub_fn("answer() -> u32", lambda w: w.write_line("42"))
        pub fn answer() -> u32 {
            42
        }

    Once the callback returns the child is gone, so the parent's prefix is
    exactly what it was before. The child must not be stored or used after
    its callback returns.
    """

    def __init__(self, sink: TextIO, indent: str = "") -> None:
        self._sink = sink
        self._indent = indent

    @property
    def indent(self) -> str:
        return self._indent

    def write_line(self, line: str) -> None:
        """
        Writes `line` prefixed by the current indentation. Empty lines are
        written without trailing whitespace, so they only keep a bare
        comment marker when inside `commented`.
        """
        if line:
            text = f"{self._indent}{line}\n"
        else:
            text = f"{self._indent.rstrip()}\n"

        try:
            self._sink.write(text)
        except (OSError, ValueError) as e:
            _log.error("Writing generated code failed: %s", e)
            raise SinkWriteError(line, e) from e

    def write_generated(self) -> None:
        """
        Writes the header every generated file starts with: the marker
        that tools use to detect generated files, and the attributes that
        silence lints the generated code does not try to satisfy.
        """
        _log.debug("Writing generated file header")
        self.write_line("// This file is generated. Do not edit")

        # Recognized by Phabricator and other review tools
        self.write_line("// @generated")

        self.write_line("")
        self.comment("https://github.com/Manishearth/rust-clippy/issues/702")
        self.write_line("#![allow(unknown_lints)]")
        self.write_line("#![allow(clippy)]")
        self.write_line("")
        self.write_line("#![cfg_attr(rustfmt, rustfmt_skip)]")
        self.write_line("")
        for lint in SUPPRESSED_LINTS:
            self.write_line(f"#![allow({lint})]")

    def todo(self, message: str) -> None:
        self.write_line(f'panic!("TODO: {message}");')

    def unimplemented(self) -> None:
        self.write_line("unimplemented!();")

    # Scopes

    def indented(self, cb: Body) -> None:
        """Calls `cb` with a writer one indentation level deeper."""
        cb(CodeWriter(self._sink, f"{self._indent}{INDENT_UNIT}"))

    def commented(self, cb: Body) -> None:
        """
        Calls `cb` with a writer whose lines are all commented out.

        The comment marker goes before the current indentation, so the
        commented code stays aligned with its surroundings.
        """
        cb(CodeWriter(self._sink, f"{COMMENT_MARKER}{self._indent}"))

    def block(self, first_line: str, last_line: str, cb: Body) -> None:
        self.write_line(first_line)
        self.indented(cb)
        self.write_line(last_line)

    def expr_block(self, prefix: str, cb: Body) -> None:
        """
        Writes ``prefix { ... }``. Use it where the block is an item or an
        expression which needs no terminator.
        """
        self.block(f"{prefix} {{", "}", cb)

    def stmt_block(self, prefix: str, cb: Body) -> None:
        """
        Writes ``prefix { ... };``. Use it where the block ends a statement,
        such as an initializer or a ``match`` whose value is discarded.
        """
        self.block(f"{prefix} {{", "};", cb)

    def unsafe_expr(self, cb: Body) -> None:
        self.expr_block("unsafe", cb)

    # Items

    def pub_const(self, name: str, field_type: str, init: str) -> None:
        self.write_line(f"pub const {name}: {field_type} = {init};")

    def lazy_static(self, name: str, ty: str) -> None:
        def entries(w: CodeWriter) -> None:
            w.field_entry("lock", "::protobuf::lazy::ONCE_INIT")
            w.field_entry("ptr", f"0 as *const {ty}")

        self.stmt_block(
            f"static mut {name}: ::protobuf::lazy::Lazy<{ty}> = ::protobuf::lazy::Lazy",
            entries,
        )

    def lazy_static_decl_get(self, name: str, ty: str, init: Body) -> None:
        """
        Declares a lazily initialized static and evaluates to a reference to
        it. `init` writes the closure body that builds the value.
        """
        self.lazy_static(name, ty)

        def get(w: CodeWriter) -> None:
            w.write_line(f"{name}.get(|| {{")
            w.indented(init)
            w.write_line("})")

        self.unsafe_expr(get)

    def lazy_static_decl_get_simple(self, name: str, ty: str, init: str) -> None:
        self.lazy_static(name, ty)
        self.unsafe_expr(lambda w: w.write_line(f"{name}.get({init})"))

    def impl_self_block(self, name: str, cb: Body) -> None:
        self.expr_block(f"impl {name}", cb)

    def impl_for_block(self, tr: str, ty: str, cb: Body) -> None:
        self.expr_block(f"impl {tr} for {ty}", cb)

    def unsafe_impl(self, what: str, for_what: str) -> None:
        self.write_line(f"unsafe impl {what} for {for_what} {{}}")

    def pub_struct(self, name: str, cb: Body) -> None:
        self.expr_block(f"pub struct {name}", cb)

    def def_struct(self, name: str, cb: Body) -> None:
        self.expr_block(f"struct {name}", cb)

    def pub_enum(self, name: str, cb: Body) -> None:
        self.expr_block(f"pub enum {name}", cb)

    def pub_trait(self, name: str, cb: Body) -> None:
        self.expr_block(f"pub trait {name}", cb)

    def def_mod(self, name: str, cb: Body) -> None:
        self.expr_block(f"mod {name}", cb)

    def pub_mod(self, name: str, cb: Body) -> None:
        self.expr_block(f"pub mod {name}", cb)

    def fn_def(self, sig: str) -> None:
        self.write_line(f"fn {sig};")

    def fn_block(self, public: bool, sig: str, cb: Body) -> None:
        if public:
            self.expr_block(f"pub fn {sig}", cb)
        else:
            self.expr_block(f"fn {sig}", cb)

    def pub_fn(self, sig: str, cb: Body) -> None:
        self.fn_block(True, sig, cb)

    def def_fn(self, sig: str, cb: Body) -> None:
        self.fn_block(False, sig, cb)

    # Fields and attributes

    def field_entry(self, name: str, value: str) -> None:
        self.write_line(f"{name}: {value},")

    def field_decl(self, name: str, field_type: str) -> None:
        self.write_line(f"{name}: {field_type},")

    def pub_field_decl(self, name: str, field_type: str) -> None:
        self.write_line(f"pub {name}: {field_type},")

    def derive(self, derive: Sequence[str]) -> None:
        self.write_line(f"#[derive({','.join(derive)})]")

    def allow(self, what: Sequence[str]) -> None:
        self.write_line(f"#[allow({','.join(what)})]")

    # Comments

    def comment(self, comment: str) -> None:
        if comment:
            self.write_line(f"// {comment}")
        else:
            self.write_line("//")

    def block_comment(self, lines: Sequence[str]) -> None:
        self.write_line("/*")
        for line in lines:
            self.write_line(f" * {line}" if line else " *")
        self.write_line(" */")

    # Control flow

    def while_block(self, cond: str, cb: Body) -> None:
        self.expr_block(f"while {cond}", cb)

    def if_stmt(self, cond: str, cb: Body) -> None:
        self.expr_block(f"if {cond}", cb)

    def if_else_stmt(self, cond: str, cb: Body) -> None:
        """
        Writes ``if cond {} else { ... }``, where `cb` fills the else branch.
        Useful to bail out unless a condition holds.
        """
        self.write_line(f"if {cond} {{")
        self.write_line("} else {")
        self.indented(cb)
        self.write_line("}")

    def if_let_stmt(self, decl: str, expr: str, cb: Body) -> None:
        self.if_stmt(f"let {decl} = {expr}", cb)

    def if_let_else_stmt(self, decl: str, expr: str, cb: Body) -> None:
        self.if_else_stmt(f"let {decl} = {expr}", cb)

    def for_stmt(self, over: str, varn: str, cb: Body) -> None:
        self.stmt_block(f"for {varn} in {over}", cb)

    def match_block(self, value: str, cb: Body) -> None:
        self.stmt_block(f"match {value}", cb)

    def match_expr(self, value: str, cb: Body) -> None:
        self.expr_block(f"match {value}", cb)

    def case_block(self, cond: str, cb: Body) -> None:
        self.block(f"{cond} => {{", "},", cb)

    def case_expr(self, cond: str, body: str) -> None:
        self.write_line(f"{cond} => {body},")

    # Wire format checks

    def error_unexpected_wire_type(self, wire_type: str) -> None:
        self.write_line(
            "return ::std::result::Result::Err("
            f"::protobuf::rt::unexpected_wire_type({wire_type}));"
        )

    def assert_wire_type(self, wire_type: WireType) -> None:
        self.if_stmt(
            f"wire_type != ::protobuf::wire_format::{wire_type.value}",
            lambda w: w.error_unexpected_wire_type("wire_type"),
        )
