"""Simple CLI entry point for the catalog client.

Commands:
  search [Category:] keywords [#page]
  lookup ASIN[,ASIN...]
  errors
  exit | quit
"""

from typing import Optional, Tuple

from dotenv import load_dotenv

load_dotenv()

from amazon_catalog import CatalogClient, client_from_env  # noqa: E402
from amazon_catalog.logging_config import configure_logging  # noqa: E402


def parse_search(args: str) -> Tuple[Optional[str], Optional[str], Optional[int]]:
    """Split "Books: python #2" into (category, keywords, page)."""
    category: Optional[str] = None
    page: Optional[int] = None

    head, sep, tail = args.rpartition("#")
    if sep and tail.strip().isdigit():
        args, page = head, int(tail.strip())

    if ":" in args:
        category, args = (part.strip() for part in args.split(":", 1))

    keywords = args.strip() or None
    return category or None, keywords, page


def print_items(items) -> None:
    if not items:
        print("No items found.\n")
        return
    for i, item in enumerate(items, 1):
        print(f"{i}. {item.title} [{item.asin}]")
        print(f"   - Price: {item.lowest_price} (list {item.list_price})")
        print(f"   - Available: {'yes' if item.available else 'no'}, Prime: {'yes' if item.prime else 'no'}")
        print(f"   - URL: {item.url}")
    print()


def handle(client: CatalogClient, line: str) -> None:
    command, _, args = line.partition(" ")
    command = command.lower()

    if command == "search":
        category, keywords, page = parse_search(args)
        items = client.search(category=category, page=page, keywords=keywords)
    elif command == "lookup":
        item_ids = [part.strip() for part in args.split(",") if part.strip()]
        if not item_ids:
            print("Usage: lookup ASIN[,ASIN...]\n")
            return
        items = client.lookup(item_ids)
    elif command == "errors":
        for error in client.get_errors():
            print(f"- {error}")
        print()
        return
    else:
        print("Unknown command. Use search, lookup, errors or exit.\n")
        return

    if items is False:
        print(f"Request failed: {client.get_errors()[-1]}\n")
    else:
        print_items(items)


def main() -> None:
    configure_logging()
    client = client_from_env()
    print("Catalog client is ready. Type 'exit' or 'quit' to stop.")

    while True:
        try:
            user_input = input("> ").strip()
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.")
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            print("Goodbye.")
            break

        handle(client, user_input)

    print("Session ended.")


if __name__ == "__main__":
    main()
