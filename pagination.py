class RowWindow:
    """Page controller over a fixed-length row sequence."""

    def __init__(self, total_rows: int, max_page_size: int = 10):
        self.max_page_size = max(1, max_page_size)
        self.page_size = self.max_page_size
        self.page_index = 0
        self.total_rows = max(0, total_rows)

    def set_page_size(self, size: int):
        # capped at the configured maximum, never at the requested value
        self.page_size = max(1, min(self.max_page_size, size))
        self.set_page_number(self.page_index)

    def set_page_number(self, number: int):
        max_page = self.page_count - 1
        if number > max_page:
            number = max_page
        if number < 0:
            number = 0
        self.page_index = number

    def next_page(self):
        self.set_page_number(self.page_index + 1)

    def previous_page(self):
        self.set_page_number(self.page_index - 1)

    def visible_page_range(self) -> tuple[int, int]:
        """Half-open range of page indices to offer as links.

        The range is centered on the current page. When it spills past
        either end of the page list the whole range is shifted back, and
        only then clamped, so its width survives unless there are fewer
        pages than links.
        """
        k = self.page_size
        page_count = self.page_count
        start = self.page_index - max((k - 1) // 2, 0)
        end = self.page_index + k // 2

        if start < 0:
            diff = -start
            start += diff
            end += diff

        if end > page_count:
            diff = end - page_count
            start -= diff
            end -= diff

        start = max(0, start)
        end = min(page_count, end)
        return start, end

    @property
    def page_count(self) -> int:
        return -(-self.total_rows // self.page_size)

    @property
    def page_start(self) -> int:
        return self.page_index * self.page_size

    @property
    def page_end(self) -> int:
        return min(self.total_rows, self.page_start + self.page_size)

    @property
    def is_first_page(self) -> bool:
        return self.page_index <= 0

    @property
    def is_last_page(self) -> bool:
        return (self.page_index + 1) * self.page_size >= self.total_rows
