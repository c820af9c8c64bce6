from html.parser import HTMLParser

from page_source import TableHost

HOST_ATTR = "data-pagedtable"
SOURCE_ATTR = "data-pagedtable-source"

VOID_TAGS = {
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
}


class _PagedTableScanner(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.hosts: list[TableHost] = []
        # (tag, role, host) for every open element
        self._stack: list[tuple[str, str | None, TableHost | None]] = []
        self._source_parts: list[str] | None = None

    def handle_starttag(self, tag, attrs):
        if tag in VOID_TAGS:
            return
        names = {name for name, _ in attrs}
        parent_role, parent_host = None, None
        if self._stack:
            _, parent_role, parent_host = self._stack[-1]

        if HOST_ATTR in names:
            host_id = dict(attrs).get("id")
            host = TableHost(name=host_id or f"table-{len(self.hosts) + 1}")
            self.hosts.append(host)
            self._stack.append((tag, "host", host))
        elif SOURCE_ATTR in names and parent_role == "host":
            self._source_parts = []
            self._stack.append((tag, "source", parent_host))
        else:
            self._stack.append((tag, None, None))

    def handle_startendtag(self, tag, attrs):
        names = {name for name, _ in attrs}
        if HOST_ATTR in names:
            host_id = dict(attrs).get("id")
            self.hosts.append(
                TableHost(name=host_id or f"table-{len(self.hosts) + 1}")
            )

    def handle_endtag(self, tag):
        if tag in VOID_TAGS:
            return
        # close up to the matching open element; tolerates unclosed children
        for pos in range(len(self._stack) - 1, -1, -1):
            if self._stack[pos][0] == tag:
                break
        else:
            return
        while len(self._stack) > pos:
            _, role, host = self._stack.pop()
            if role == "source" and self._source_parts is not None:
                host.sources.append("".join(self._source_parts))
                self._source_parts = None

    def handle_data(self, data):
        if self._source_parts is not None:
            self._source_parts.append(data)


def discover_tables(html: str) -> list[TableHost]:
    """Find every ``data-pagedtable`` element in document order."""
    scanner = _PagedTableScanner()
    scanner.feed(html)
    scanner.close()
    return scanner.hosts
