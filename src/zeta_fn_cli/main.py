"""Zeta Fn CLI 메인 엔트리"""
import typer
from rich.console import Console
from zeta_fn_cli.commands import arity, config

console = Console()

app = typer.Typer(
    name="zeta-fn",
    help="Zeta Fn - 함수 변환 프리미티브 도구",
    add_completion=False,
)

# 서브커맨드 등록
app.add_typer(config.app, name="config")
app.command("arity")(arity.arity)


def _print_version() -> None:
    from zeta_fn_cli import __version__
    console.print(f"[bold blue]zeta-fn[/bold blue] version [green]{__version__}[/green]")


def _version_option(value: bool) -> None:
    if value:
        _print_version()
        raise typer.Exit()


@app.callback()
def main_callback(
    show_version: bool = typer.Option(
        False,
        "--version", "-V",
        callback=_version_option,
        is_eager=True,
        help="버전 정보 출력 후 종료",
    ),
) -> None:
    """Zeta Fn CLI"""


@app.command()
def version() -> None:
    """버전 정보 출력"""
    _print_version()


def cli() -> None:
    """CLI 진입점"""
    app()


if __name__ == "__main__":
    cli()
