"""REPL for the catalog CLI."""

from __future__ import annotations

import httpx

from catalog_cli.client import ApiClient

NO_MATCHES_MESSAGE = "No products matching selected criteria"


def format_products(catalog: dict) -> list[str]:
    """One line per visible product, or the empty-state message."""
    products = catalog.get("products", [])
    if not products:
        return [NO_MATCHES_MESSAGE]

    lines = []
    for p in products:
        category = p.get("category")
        user = p.get("user")
        label = f"{category['icon']} - {category['title']}" if category else ""
        owner = user["name"] if user else ""
        lines.append(f"{p['id']:>3}  {p['name']:<20} {label:<20} {owner}")
    return lines


class Repl:
    """Interactive REPL over the catalog API."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.running = True

    def start(self):
        """Start the REPL."""
        try:
            self._show(self.client.catalog())
        except httpx.HTTPError as e:
            print(f"Failed to reach catalog API at {self.client.api_url}: {e}")
            self.client.close()
            return

        while self.running:
            try:
                line = input("catalog > ")
            except (EOFError, KeyboardInterrupt):
                print()
                break

            self.handle_line(line)

        self.client.close()

    def handle_line(self, line: str):
        """Commands start with "/"; anything else becomes the search query."""
        if not line:
            return

        if line.startswith("/"):
            self._handle_command(line.strip())
        else:
            # Query is sent verbatim, casing and inner spaces intact
            self._run(lambda: self.client.set_query(line))

    def _handle_command(self, line: str):
        parts = line.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else None

        if cmd == "/quit":
            self.running = False
            print("Goodbye.")
        elif cmd == "/owner":
            if arg:
                self._run(lambda: self.client.select_owner(arg))
            else:
                print("Usage: /owner <name>")
        elif cmd == "/all":
            self._run(lambda: self.client.select_owner(""))
        elif cmd == "/clear":
            self._run(self.client.clear_query)
        elif cmd == "/reset":
            self._run(self.client.reset)
        elif cmd == "/users":
            self._list_users()
        elif cmd == "/view":
            self._view()
        elif cmd == "/help":
            self._show_help()
        else:
            print(f"Unknown command: {cmd}")
            print("Type /help for available commands.")

    def _run(self, call):
        """Apply one transition and show the resulting rows."""
        try:
            catalog = call()
        except httpx.HTTPError as e:
            print(f"  Error: {e}")
            return
        self._show(catalog)

    def _show(self, catalog: dict):
        state = catalog.get("state", {})
        owner = state.get("selected_owner_name") or "All"
        query = state.get("search_query", "")
        print(f"  owner: {owner}  query: {query!r}")
        for line in format_products(catalog):
            print(f"  {line}")

    def _list_users(self):
        try:
            catalog = self.client.catalog()
        except httpx.HTTPError as e:
            print(f"Failed to list users: {e}")
            return

        selected = catalog.get("state", {}).get("selected_owner_name", "")
        print(f"  {'* ' if not selected else '  '}All")
        for name in catalog.get("owners", []):
            marker = "* " if name == selected else "  "
            print(f"  {marker}{name}")

    def _view(self):
        """Render the full page as text."""
        try:
            text = self.client.render_text()
        except httpx.HTTPError as e:
            print(f"Failed to render catalog: {e}")
            return
        print()
        print(text)
        print()

    def _show_help(self):
        """Show help message."""
        print("""
  Type any text to search product names (case-insensitive).

  REPL Commands:
    /owner <name>  - Show only products owned by <name>
    /all           - Show products of all owners
    /clear         - Clear the search text
    /reset         - Reset owner and search
    /users         - List owners (* marks the selection)
    /view          - Render the catalog page as text
    /help          - Show this help
    /quit          - Exit REPL
""")
