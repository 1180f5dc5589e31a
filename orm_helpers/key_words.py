KEY_WORDS = {"order", "group", "user", "table", "select", "where", "from", "index", "key", "references"}

def get_column_name(name: str) -> str:
    """Return the column name, escaping it if it's a SQL keyword."""
    if name.lower() in KEY_WORDS:
        return f"[{name}]"
    return name
