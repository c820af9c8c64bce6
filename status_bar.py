import time


def render_status(context, width):
    """
    context keys: status_msg, status_until, focus, table_count, table_name,
                   long_label, failed_count
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        table_count = context.get("table_count", 0)
        failed = context.get("failed_count", 0)
        if table_count == 0:
            text = " No tables to display"
        else:
            focus = context.get("focus", 0)
            name = context.get("table_name") or ""
            label = context.get("long_label") or ""
            text = f" TABLE {focus + 1}/{table_count} | {name} | {label}"
        if failed:
            text += f" | {failed} failed to load"

    return text.ljust(width)[:width]
