"""설정 확인 커맨드"""
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Optional
from pathlib import Path

from zeta_fn import load_config, error_to_dict, Failure

app = typer.Typer(help="설정 관리")
console = Console()


@app.command("show")
def show(
    config_path: Optional[Path] = typer.Option(
        None,
        "--path", "-p",
        help="설정 파일 경로 (생략 시 기본 경로 탐색)",
    ),
) -> None:
    """적용될 설정 출력"""
    result = load_config(config_path)
    if isinstance(result, Failure):
        err = error_to_dict(result.error)
        console.print(f"[bold red]Error ({err['code']}): {escape(err['message'])}[/bold red]")
        raise typer.Exit(1)

    table = Table(title="zeta-fn 설정")
    table.add_column("섹션", style="cyan")
    table.add_column("항목", style="magenta")
    table.add_column("값", style="green")

    for section, values in result.value.model_dump().items():
        for name, value in values.items():
            table.add_row(section, name, repr(value))

    console.print(table)
