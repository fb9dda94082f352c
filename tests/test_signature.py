"""Tests for signature location, span resolution and annotation merging."""

import pytest

from stacktriage.extractors.signature import (
    find_signature,
    has_modifier,
    is_annotation_line,
    is_package_declaration,
    locate_signature_start,
    looks_like_declaration,
    merge_annotations,
    resolve_signature_end,
)


@pytest.mark.parametrize("line", [
    "void check() {",
    "    String getName() {",
    "<T> List<T> getList(Class<T> type) {",
    "    int[] values(int n) {",
    "    Map<String, List<Order>> group(List<Order> orders) {",
])
def test_package_declaration_accepted(line):
    assert is_package_declaration(line)


@pytest.mark.parametrize("line", [
    "if (ready) {",
    "    return compute(x);",
    "    String name = compute(x);",
    '    LOG.info("x");',
    "    result.add(item);",
    "    doSomething(a, b);",
    '    throw new IllegalStateException("x");',
    "    } else if (x) {",
    "    new Foo(bar);",
    "    for (Order o : orders) {",
])
def test_package_declaration_rejected(line):
    assert not is_package_declaration(line)


@pytest.mark.parametrize("line", [
    "    public void run() {",
    "    @Override public String toString() {",
    "    private static <T> T first(List<T> xs) {",
    "    public Map<String, Integer>",
    "    protected abstract void refresh(int id);",
])
def test_modifier_declaration_accepted(line):
    assert has_modifier(line)


@pytest.mark.parametrize("line", [
    "public class Foo {",
    "    private final Foo foo;",
    "    private static final Logger LOG = LoggerFactory.getLogger(Foo.class);",
    "        synchronized (lock) {",
    "            default:",
    "    static {",
    "public record Point(int x, int y) {",
])
def test_modifier_declaration_rejected(line):
    assert not has_modifier(line)


def test_annotation_lines():
    assert is_annotation_line("    @Override")
    assert is_annotation_line('    @RequestMapping(value = "/x", method = GET)')
    assert not is_annotation_line("    @Override public void run() {")
    assert not is_annotation_line("    // @Override")


def test_looks_like_declaration():
    assert looks_like_declaration("void refresh(int id);")
    assert looks_like_declaration("@Nullable String find(String key);")
    assert not looks_like_declaration("repository.save(order);")
    assert not looks_like_declaration("int x = compute();")
    assert not looks_like_declaration("count++;")


def test_locate_multi_line_signature(order_service_lines):
    assert locate_signature_start(order_service_lines, 22) == 13


def test_locate_returns_none_above_any_method(order_service_lines):
    assert locate_signature_start(order_service_lines, 6) is None


def test_resolve_signature_end_on_later_line(order_service_lines):
    assert resolve_signature_end(order_service_lines, 13) == 14


def test_resolve_signature_end_bodyless(order_service_lines):
    assert resolve_signature_end(order_service_lines, 31) == 31


def test_resolve_signature_end_gives_up_after_lookahead():
    lines = ["void open(int a,"] + ["    int b,"] * 40
    assert resolve_signature_end(lines, 0) is None


def test_resolve_signature_end_rejects_statement():
    lines = ["public void go()", "    x = 1;"]
    assert resolve_signature_end(lines, 0) is None


def test_find_signature_skips_unresolvable_candidate():
    lines = [
        "void outer() {",
        "    Foo helper(x)",
        "        .value = 3;",
        "}",
    ]
    assert find_signature(lines, 2) == (0, 0)


def test_block_comment_is_transparent():
    lines = [
        "public class Host {",
        "    public void outer() {",
        "        int a = 1;",
        "        /* old version:",
        "        void fake(int x)",
        "        */",
        "        a++;",
        "    }",
        "}",
    ]
    assert find_signature(lines, 6) == (1, 1)


def test_merge_contiguous_annotations(order_service_lines):
    assert merge_annotations(order_service_lines, 13) == 11


def test_blank_line_breaks_annotations(order_service_lines):
    assert merge_annotations(order_service_lines, 35) == 35


def test_comment_breaks_annotations():
    lines = ["@Deprecated", "// note", "public void x() {"]
    assert merge_annotations(lines, 2) == 2


def test_parameter_continuation_is_not_a_signature_start():
    lines = [
        "    public void process(int a,",
        "                        final String b,",
        "                        int c) {",
        "        handle(a, b, c);",
    ]
    assert locate_signature_start(lines, 3) == 0
