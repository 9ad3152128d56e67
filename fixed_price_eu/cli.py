"""Command-line interface for Fixed Price Across EU."""

import json
import logging
from pathlib import Path
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.json import JSON

from .config import StoreConfig
from .models.pricing_models import PriceContext
from .notices import check_settings
from .storage import BaseCatalog, SQLiteCatalog, load_catalog
from .storefront import Storefront

app = typer.Typer(
    name="fixed-price-eu",
    help="Same final price across EU countries, whatever the VAT rate"
)
console = Console()


def load_config(config_path: str) -> StoreConfig:
    """Load configuration from JSON file."""
    config_file = Path(config_path)
    if not config_file.exists():
        console.print(f"[red]Error: Config file not found: {config_path}[/red]")
        raise typer.Exit(1)

    with open(config_file) as f:
        config_data = json.load(f)

    try:
        return StoreConfig(**config_data)
    except ValidationError as e:
        console.print(f"[red]✗ Configuration error:[/red] {str(e)}")
        raise typer.Exit(1)


def open_catalog(catalog: Optional[str], db: Optional[str]) -> BaseCatalog:
    """Open a SQLite catalog, optionally seeded from a JSON catalog file."""
    if catalog and not Path(catalog).exists():
        console.print(f"[red]Error: Catalog file not found: {catalog}[/red]")
        raise typer.Exit(1)
    if db:
        store = SQLiteCatalog(db)
        if catalog:
            for product in load_catalog(catalog).all():
                store.set(product)
        return store
    if not catalog:
        console.print("[red]Error: Provide --catalog or --db.[/red]")
        raise typer.Exit(1)
    return load_catalog(catalog)


def make_context(country: Optional[str]) -> PriceContext:
    """Build a storefront request context for a customer country."""
    try:
        return PriceContext(customer_country=country)
    except ValidationError:
        console.print(f"[red]Error: Invalid country code: {country}[/red]")
        raise typer.Exit(1)


@app.command()
def init(
    output: str = typer.Option("config.json", help="Output configuration file path")
):
    """Initialize a new configuration file with example values."""
    example_config = StoreConfig.model_config["json_schema_extra"]["example"]

    output_path = Path(output)
    with open(output_path, 'w') as f:
        json.dump(example_config, f, indent=2)

    console.print(f"[green]✓[/green] Configuration file created: {output}")
    console.print("\n[yellow]⚠ Please edit the base country and tax rates to match your store![/yellow]")


@app.command()
def validate(
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """Validate configuration file and report settings notices."""
    cfg = load_config(config)
    console.print("[green]✓[/green] Configuration is valid!")
    console.print(f"\n[bold]Store:[/bold] {cfg.store_name}")
    console.print(f"[bold]Base country:[/bold] {cfg.tax.base_country}")
    console.print(f"[bold]Prices include tax:[/bold] {cfg.tax.prices_include_tax}")
    console.print(f"[bold]Tax rates:[/bold] {len(cfg.tax.rates)}")

    for notice in check_settings(cfg.tax):
        color = "red" if notice.level == "error" else "yellow"
        console.print(f"[{color}]⚠ {notice.message}[/{color}]")


@app.command()
def quote(
    price: float = typer.Argument(..., help="Configured price"),
    country: Optional[str] = typer.Option(None, help="Customer country code"),
    tax_class: str = typer.Option("standard", help="Product tax class"),
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """Show the net price charged to a customer country."""
    cfg = load_config(config)
    storefront = Storefront(cfg)
    adjustment = storefront.quote(price, tax_class, True, make_context(country))

    table = Table(title=f"Price for {country or 'unresolved country'}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Original price", str(adjustment.original_price))
    table.add_row("Base rate", f"{adjustment.base_rate}%")
    table.add_row("Customer rate", f"{adjustment.customer_rate}%")
    if adjustment.target_gross is not None:
        table.add_row("Target gross", str(adjustment.target_gross))
    table.add_row("Net price", str(adjustment.price))
    table.add_row("Adjusted", "yes" if adjustment.adjusted else f"no ({adjustment.skip_reason})")
    console.print(table)


@app.command()
def render(
    product_id: str = typer.Argument(..., help="Product ID to render"),
    country: Optional[str] = typer.Option(None, help="Customer country code"),
    catalog: Optional[str] = typer.Option(None, help="Catalog JSON file"),
    db: Optional[str] = typer.Option(None, help="SQLite catalog database"),
    config: str = typer.Option("config.json", help="Configuration file path"),
):
    """Render a catalog product's prices for a customer country."""
    cfg = load_config(config)
    context = make_context(country)
    store = open_catalog(catalog, db)
    try:
        product = store.get(product_id)
    finally:
        store.close()
    if not product:
        console.print(f"[red]Error: Product not found: {product_id}[/red]")
        raise typer.Exit(1)

    rendered = Storefront(cfg).render_product(product, context)
    console.print(JSON(json.dumps(rendered.model_dump(mode='json'), indent=2)))


@app.command()
def serve(
    config: str = typer.Option("config.json", help="Configuration file path"),
    catalog: Optional[str] = typer.Option(None, help="Catalog JSON file"),
    db: Optional[str] = typer.Option(None, help="SQLite catalog database"),
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    log_level: str = typer.Option("INFO", help="Logging level"),
):
    """Start the pricing server."""
    from .router import create_pricing_app
    from .telemetry import get_adjustment_counter
    import uvicorn

    logging.basicConfig(level=log_level.upper())
    cfg = load_config(config)
    store = open_catalog(catalog, db)
    storefront = Storefront(cfg, adjustment_counter=get_adjustment_counter())

    for notice in check_settings(cfg.tax):
        console.print(f"[yellow]⚠ {notice.message}[/yellow]")

    console.print(f"[green]Starting pricing server on {host}:{port}[/green]")
    console.print(f"[blue]Prices endpoint: http://{host}:{port}/prices/products[/blue]")

    uvicorn.run(create_pricing_app(storefront, store), host=host, port=port)


if __name__ == "__main__":
    app()
