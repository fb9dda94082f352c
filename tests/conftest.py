"""Shared test fixtures."""

import pytest

ORDER_SERVICE_LINES = [
    'package com.example.orders;',                              # 1
    '',                                                         # 2
    'import java.util.List;',                                   # 3
    '',                                                         # 4
    'public class OrderService {',                              # 5
    '',                                                         # 6
    '    private final OrderRepository repository;',            # 7
    '',                                                         # 8
    '    /**',                                                  # 9
    '     * Places an order.',                                  # 10
    '     */',                                                  # 11
    '    @Override',                                            # 12
    '    @Transactional(readOnly = false)',                     # 13
    '    public Order place(Order order,',                      # 14
    '                       Customer customer) {',              # 15
    '        if (order == null) {',                             # 16
    '            throw new IllegalArgumentException("order { missing");',  # 17
    '        }',                                                # 18
    '        // closing brace: }',                              # 19
    '        String json = """',                                # 20
    '            { "id": 1 }',                                  # 21
    '            """;',                                         # 22
    '        return repository.save(order);',                   # 23
    '    }',                                                    # 24
    '',                                                         # 25
    '    void check() {',                                       # 26
    '        if (x) {',                                         # 27
    '            return;',                                      # 28
    '        }',                                                # 29
    '    }',                                                    # 30
    '',                                                         # 31
    '    abstract void refresh(int id);',                       # 32
    '',                                                         # 33
    '    @Deprecated',                                          # 34
    '',                                                         # 35
    '    public void legacy() {',                               # 36
    '        log.info("}");',                                   # 37
    '    }',                                                    # 38
    '}',                                                        # 39
]

CHECKER_LINES = [
    'class Checker {',
    '    boolean x;',
    'void check() {',
    '  if (x) {',
    '    return;',
    '  }',
    '}',
    '',
    '// end',
    '}',
]


@pytest.fixture
def order_service_lines():
    """A Java class exercising annotations, strings, comments and text blocks."""
    return list(ORDER_SERVICE_LINES)


@pytest.fixture
def order_service_source():
    return "\n".join(ORDER_SERVICE_LINES)


@pytest.fixture
def checker_source():
    """Ten lines with ``void check()`` on lines 3-7."""
    return "\n".join(CHECKER_LINES)


@pytest.fixture
def stack_trace_text():
    return "\n".join([
        'java.lang.IllegalStateException: boom',
        '\tat com.example.orders.OrderService.place(OrderService.java:23)',
        '\tat com.example.orders.OrderController.lambda$create$0(OrderController.java:41)',
        '\tat java.base/java.lang.Thread.run(Thread.java:829)',
        '\tat sun.reflect.NativeMethodAccessorImpl.invoke0(Native Method)',
        'Caused by: java.io.IOException: disk full',
        '\tat org.lib.Storage.write(Storage.java:10)',
        '\tat com.example.orders.OrderService$Writer.flush(OrderService.java:88)',
        '\t... 3 more',
    ])


class StubClient:
    """File client serving a fixed mapping of path -> text."""

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.calls = []

    def authenticate(self) -> bool:
        return True

    def get_file_content(self, repo, file_path, branch="main"):
        self.calls.append((repo, file_path, branch))
        return self.files.get(file_path)


@pytest.fixture
def stub_client(order_service_source):
    return StubClient({
        "src/main/java/com/example/orders/OrderService.java": order_service_source,
    })


@pytest.fixture
def empty_client():
    return StubClient({})
