"""Command-line interface for agripredict."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from agripredict.config.settings import AppConfig

app = typer.Typer(
    name="agripredict",
    help="Crop recommendation and yield prediction on synthetic-trained networks.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", help="Random seed (overrides config random_state)."),
]


def _load_app_config(config: Path | None, seed: int | None) -> "AppConfig":
    from agripredict.config.loader import load_config
    from agripredict.utils.logging import configure_from_settings

    app_config = load_config(config, random_state=seed)
    configure_from_settings(app_config.logging)
    return app_config


@app.command()
def recommend(
    nitrogen: Annotated[float, typer.Option(help="Soil nitrogen (N).")],
    phosphorus: Annotated[float, typer.Option(help="Soil phosphorus (P).")],
    potassium: Annotated[float, typer.Option(help="Soil potassium (K).")],
    temperature: Annotated[float, typer.Option(help="Temperature in °C.")],
    humidity: Annotated[float, typer.Option(help="Relative humidity in %.")],
    ph: Annotated[float, typer.Option("--ph", help="Soil pH.")],
    rainfall: Annotated[float, typer.Option(help="Rainfall in mm.")],
    config: ConfigOption = None,
    seed: SeedOption = None,
) -> None:
    """Recommend the top crops for soil and climate measurements."""
    from agripredict.modeling.training import InitializationFailure
    from agripredict.schemas.crop import CropInput
    from agripredict.service import CropRecommendationService

    app_config = _load_app_config(config, seed)
    service = CropRecommendationService(app_config)

    try:
        with console.status("[blue]Training crop recommendation model...[/blue]"):
            service.train()
        predictions = service.predict(
            CropInput(
                nitrogen=nitrogen,
                phosphorus=phosphorus,
                potassium=potassium,
                temperature=temperature,
                humidity=humidity,
                ph=ph,
                rainfall=rainfall,
            )
        )
    except InitializationFailure as e:
        console.print(f"[red]Model initialization failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Crop Recommendations")
    table.add_column("Rank", style="dim")
    table.add_column("Crop", style="cyan")
    table.add_column("Confidence", justify="right", style="green")
    table.add_column("Suitability", justify="right", style="yellow")

    for rank, prediction in enumerate(predictions, start=1):
        table.add_row(
            str(rank),
            prediction.crop,
            f"{prediction.confidence:.1f}%",
            f"{prediction.suitability_score:.0f}/100",
        )

    console.print(table)


@app.command("predict-yield")
def predict_yield(
    season: Annotated[str, typer.Option(help="Season: Kharif, Rabi or Summer.")],
    state: Annotated[str, typer.Option(help="State name, e.g. Punjab.")],
    area: Annotated[float, typer.Option(help="Cultivated area in hectares.")],
    rainfall: Annotated[float, typer.Option(help="Annual rainfall in mm.")],
    fertilizer: Annotated[float, typer.Option(help="Fertilizer applied.")],
    pesticides: Annotated[float, typer.Option(help="Pesticides applied.")],
    crop_year: Annotated[str, typer.Option(help="Crop year (informational).")] = "",
    config: ConfigOption = None,
    seed: SeedOption = None,
) -> None:
    """Predict crop yield for a field."""
    from agripredict.modeling.training import InitializationFailure
    from agripredict.schemas.yields import YieldInput
    from agripredict.service import YieldPredictionService

    app_config = _load_app_config(config, seed)
    service = YieldPredictionService(app_config)

    try:
        with console.status("[blue]Training yield prediction model...[/blue]"):
            service.train()
        prediction = service.predict(
            YieldInput(
                crop_year=crop_year,
                season=season,
                state=state,
                area=area,
                annual_rainfall=rainfall,
                fertilizer=fertilizer,
                pesticides=pesticides,
            )
        )
    except InitializationFailure as e:
        console.print(f"[red]Model initialization failed: {e}[/red]")
        raise typer.Exit(code=1) from e

    table = Table(title="Yield Prediction")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Predicted yield", f"{prediction.predicted_yield} quintal")
    table.add_row("Confidence", f"{prediction.confidence:.0f}%")
    table.add_row("Rainfall factor", f"{prediction.factors.rainfall:.0f}")
    table.add_row("Fertilizer factor", f"{prediction.factors.fertilizer:.0f}")
    table.add_row("Pesticides factor", f"{prediction.factors.pesticides:.0f}")
    table.add_row("Area factor", f"{prediction.factors.area:.0f}")

    console.print(table)

    if prediction.recommendations:
        console.print("\n[blue]Recommendations:[/blue]")
        for recommendation in prediction.recommendations:
            console.print(f"  • {recommendation}")


@app.command()
def version() -> None:
    """Show version information."""
    from agripredict import __version__

    console.print(f"agripredict version {__version__}")


if __name__ == "__main__":
    app()
