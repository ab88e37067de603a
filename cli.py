# cli.py
import argparse
import os
import sys
from datetime import datetime
from typing import List, Dict, Any, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm, Prompt
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.productclient import ProductClient

console = Console()
c = ProductClient(
    base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
    api_key=os.getenv("API_KEY"),
)

status_message = "Ready"
product_cache: List[Dict[str, Any]] = []

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
    'scrollbar.background': 'bg:#88aaaa',
    'scrollbar.button': 'bg:#222222',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]], title: str = "📦 Products Catalog"):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title=title,
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", width=12)
    table.add_column("Name", style="bold", width=20)
    table.add_column("Description", width=28)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Category", width=15)
    table.add_column("Stock", width=8)

    for p in products:
        stock = "[green]yes[/green]" if p.get("inStock") else "[red]no[/red]"
        table.add_row(
            str(p.get("id", "N/A")),
            str(p.get("name", "N/A")),
            str(p.get("description", "")),
            f"${p.get('price', 0):.2f}",
            str(p.get("category", "N/A")),
            stock
        )
    console.print(table)


def show_page(page: Dict[str, Any]):
    show_products(page.get("data", []))
    console.print(
        f"[dim]page {page.get('page')} of {page.get('totalPages')} "
        f"({page.get('total')} matching)[/dim]"
    )


def show_stats(stats: Dict[str, Any]):
    table = Table(box=box.ROUNDED, header_style="bold yellow", show_lines=True)
    table.add_column("Category", width=20)
    table.add_column("Products", justify="right", width=10)
    for name, count in stats.get("categories", {}).items():
        table.add_row(name, str(count))

    summary = (
        f"Total: [bold]{stats.get('totalProducts', 0)}[/bold]   "
        f"In stock: [green]{stats.get('inStock', 0)}[/green]   "
        f"Out of stock: [red]{stats.get('outOfStock', 0)}[/red]"
    )
    console.print(Panel(table, title="📊 Catalog statistics", subtitle=summary, border_style="yellow"))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner.
    Returns the result, or None after printing the error.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


def refresh_cache():
    global product_cache
    page = try_api(c.list_products, limit=1000)
    product_cache = page.get("data", []) if page else []


def get_product_completer():
    if not product_cache:
        refresh_cache()
    ids = [str(p.get("id", "")) for p in product_cache]
    return WordCompleter([i for i in ids if i], ignore_case=True)


def get_category_completer():
    cats = {str(p.get("category", "")) for p in product_cache}
    return WordCompleter(sorted(x for x in cats if x), ignore_case=True)


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row(
        "🛍️ Product API",
        "[bold blue]Catalog CLI with Autocomplete[/bold blue]",
        f"[dim]{now}[/dim]"
    )
    return Panel(header, style="bold blue")


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_float(message: str, default: float = 10.0) -> float:
    while True:
        raw = Prompt.ask(message, default=str(default))
        try:
            return float(raw)
        except ValueError:
            console.print("[red]Please enter a valid number.[/red]")


def ask_product_fields(existing: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    existing = existing or {}
    name = prompt_with_autocomplete("Product name", default=str(existing.get("name", "")))
    price = ask_float("💰 Price", default=existing.get("price", 10.0))
    description = prompt_with_autocomplete("Description", default=str(existing.get("description", "")))
    category = prompt_with_autocomplete(
        "🏷️ Category", completer=get_category_completer(), default=str(existing.get("category", ""))
    )
    in_stock = Confirm.ask("In stock?", default=bool(existing.get("inStock", True)))
    return {
        "name": name,
        "price": price,
        "description": description or None,
        "category": category or None,
        "in_stock": in_stock,
    }


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message

    console.clear()
    console.print(create_header())
    refresh_cache()

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "5", "➕ Create product"),
            ("2", "🔍 Search products", "6", "✏️ Update product"),
            ("3", "ℹ️ Get product by ID", "7", "🗑️ Delete product"),
            ("4", "📊 Statistics", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 8)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            category = prompt_with_autocomplete("Category (blank for all)", completer=get_category_completer())
            page = IntPrompt.ask("Page", default=1)
            limit = IntPrompt.ask("Per page", default=10)
            res = try_api(c.list_products, category=category or None, page=page, limit=limit,
                          success_msg="Products loaded successfully")
            if res is not None:
                show_page(res)

        elif choice == "2":
            term = prompt_with_autocomplete("Enter search term")
            res = try_api(c.list_products, search=term, success_msg=f"Search for '{term}' completed")
            if res is not None:
                show_page(res)

        elif choice == "3":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            resp = try_api(c.get_product, pid, success_msg=f"Product {pid} details loaded")
            if resp:
                show_products([resp])

        elif choice == "4":
            resp = try_api(c.get_stats, success_msg="Statistics loaded")
            if resp:
                show_stats(resp)

        elif choice == "5":
            fields = ask_product_fields()
            resp = try_api(c.create_product, success_msg=f"Product '{fields['name']}' created", **fields)
            if resp:
                console.print(Panel(f"Created product: [green]{resp['id']}[/green]"))
                refresh_cache()

        elif choice == "6":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            current = try_api(c.get_product, pid)
            if current:
                fields = ask_product_fields(current)
                resp = try_api(c.update_product, pid, success_msg=f"Product {pid} updated", **fields)
                if resp:
                    show_products([resp])
                    refresh_cache()

        elif choice == "7":
            pid = prompt_with_autocomplete("Enter product ID", completer=get_product_completer())
            if Confirm.ask(f"[red]Delete product {pid}?[/red]"):
                try_api(c.delete_product, pid, success_msg=f"Product {pid} deleted")
                refresh_cache()

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Goodbye"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


# ---------------------------
# One-shot commands
# ---------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Product API CLI (no command starts the interactive menu)")
    subparsers = parser.add_subparsers(dest="command")

    lp = subparsers.add_parser("list", help="List products")
    lp.add_argument("--category", help="Exact category to filter on")
    lp.add_argument("--search", help="Case-insensitive text in name or description")
    lp.add_argument("--page", type=int, default=1)
    lp.add_argument("--limit", type=int, default=10)

    gp = subparsers.add_parser("get", help="Show one product")
    gp.add_argument("product_id")

    subparsers.add_parser("stats", help="Show catalog statistics")

    for cmd in ("create", "update"):
        sp = subparsers.add_parser(cmd, help=f"{cmd.capitalize()} a product (needs API_KEY)")
        if cmd == "update":
            sp.add_argument("product_id")
        sp.add_argument("--name", required=True)
        sp.add_argument("--price", type=float, required=True)
        sp.add_argument("--description")
        sp.add_argument("--category")
        stock = sp.add_mutually_exclusive_group()
        stock.add_argument("--in-stock", dest="in_stock", action="store_true", default=None)
        stock.add_argument("--out-of-stock", dest="in_stock", action="store_false")

    dp = subparsers.add_parser("delete", help="Delete a product (needs API_KEY)")
    dp.add_argument("product_id")
    return parser


def run_command(args: argparse.Namespace) -> None:
    fields = {}
    if args.command in ("create", "update"):
        fields = dict(name=args.name, price=args.price, description=args.description,
                      category=args.category, in_stock=args.in_stock)

    if args.command == "list":
        show_page(c.list_products(args.category, args.search, args.page, args.limit))
    elif args.command == "get":
        show_products([c.get_product(args.product_id)])
    elif args.command == "stats":
        show_stats(c.get_stats())
    elif args.command == "create":
        show_products([c.create_product(**fields)], title="➕ Created")
    elif args.command == "update":
        show_products([c.update_product(args.product_id, **fields)], title="✏️ Updated")
    elif args.command == "delete":
        c.delete_product(args.product_id)
        console.print(show_status(f"Product {args.product_id} deleted"))


if __name__ == "__main__":
    args = build_parser().parse_args()
    try:
        if args.command:
            run_command(args)
        else:
            menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Error: {e}[/bold red]")
        sys.exit(1)
