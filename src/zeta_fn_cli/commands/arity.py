"""필수 인자 수 조회 커맨드"""
import typer
from rich.console import Console
from rich.markup import escape

from zeta_fn import inspect_arity, error_to_dict, Failure

console = Console()


def arity(
    target: str = typer.Argument(..., help="'pkg.module:Class.method' 또는 'pkg.module.func'"),
) -> None:
    """callable 경로의 필수 인자 수 출력"""
    result = inspect_arity(target)
    if isinstance(result, Failure):
        err = error_to_dict(result.error)
        console.print(f"[bold red]Error ({err['code']}): {escape(err['message'])}[/bold red]")
        raise typer.Exit(1)

    console.print(f"[cyan]{target}[/cyan] requires [green]{result.value}[/green] argument(s)")
