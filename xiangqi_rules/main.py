#!/usr/bin/env python3
"""
Xiangqi Rules 主入口文件

提供命令行接口：显示棋盘、查询走法、查看将军/将死状态。
"""

import sys
from typing import Iterable, Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from xiangqi_rules import __version__, __description__
from xiangqi_rules.src.xiangqi_engine.config import ConfigManager, EngineConfig
from xiangqi_rules.src.xiangqi_engine.rules_engine import (
    Board, Position, Side, BOARD_ROWS, BOARD_COLS,
    initial_board, pseudo_moves, safe_moves, get_game_status, is_checkmate, is_in_check
)
from xiangqi_rules.src.xiangqi_engine.utils import XiangqiError, setup_logger

console = Console()


def load_board(path: Optional[str]) -> Board:
    """从JSON文件加载棋盘，未指定文件时返回初始局面"""
    if not path:
        return initial_board()
    with open(path, 'r', encoding='utf-8') as f:
        return Board.from_json(f.read())


def render_board(board: Board, config: EngineConfig,
                 highlights: Iterable[Position] = ()) -> Table:
    """将棋盘渲染为rich表格，highlights中的空格以 · 标出"""
    marked = set(highlights)
    show_coordinates = config.display.show_coordinates
    table = Table(show_header=show_coordinates, show_lines=True, padding=(0, 1))
    if show_coordinates:
        table.add_column("")
    for col in range(BOARD_COLS):
        table.add_column(str(col), justify="center")

    for row in range(BOARD_ROWS):
        cells = []
        for col in range(BOARD_COLS):
            piece = board.piece_at((row, col))
            if piece is None:
                cells.append(Text("·" if (row, col) in marked else " ", style="bold green"))
                continue
            label = piece.display_name if config.display.piece_style == 'chinese' else piece.symbol
            style = "bold red" if piece.side is Side.RED else "bold"
            if (row, col) in marked:
                style += " reverse"
            cells.append(Text(label, style=style))
        if show_coordinates:
            cells.insert(0, Text(str(row), style="dim"))
        table.add_row(*cells)
    return table


@click.group()
@click.version_option(version=__version__, prog_name="Xiangqi Rules")
@click.option('--debug', is_flag=True, help='启用调试日志')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='配置文件路径')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config_path: Optional[str]):
    """中国象棋规则引擎 - 走法生成、将军检测与将死判定"""
    try:
        config = ConfigManager(config_path).load()
    except XiangqiError as e:
        raise click.ClickException(str(e))

    setup_logger(config.logging, level='DEBUG' if debug else None)
    ctx.obj = config


@cli.command()
@click.option('--board', 'board_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON格式的棋盘文件，默认为初始局面')
@click.pass_obj
def show(config: EngineConfig, board_path: Optional[str]):
    """显示棋盘"""
    try:
        board = load_board(board_path)
    except XiangqiError as e:
        raise click.ClickException(str(e))
    console.print(render_board(board, config))


@cli.command()
@click.argument('row', type=int)
@click.argument('col', type=int)
@click.option('--board', 'board_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON格式的棋盘文件，默认为初始局面')
@click.option('--side', type=click.Choice(['red', 'black']), default='red', help='走子方')
@click.option('--pseudo', is_flag=True, help='显示伪合法走法（不排除自将）')
@click.pass_obj
def moves(config: EngineConfig, row: int, col: int, board_path: Optional[str],
          side: str, pseudo: bool):
    """列出 (ROW, COL) 处棋子的走法"""
    try:
        board = load_board(board_path)
        generate = pseudo_moves if pseudo else safe_moves
        targets = generate(board, (row, col), side)
    except XiangqiError as e:
        raise click.ClickException(str(e))

    piece = board.piece_at((row, col))
    if piece is None or not targets:
        console.print(f"[yellow]({row}, {col}) 没有可走的棋步[/yellow]")
        return

    console.print(render_board(board, config, highlights=targets))
    kind = "伪合法走法" if pseudo else "合法走法"
    console.print(f"[green]{piece.display_name} ({row}, {col}) 共 {len(targets)} 个{kind}:[/green]")
    console.print(", ".join(f"({r}, {c})" for r, c in targets), soft_wrap=True)


@cli.command()
@click.option('--board', 'board_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON格式的棋盘文件，默认为初始局面')
@click.option('--side', type=click.Choice(['red', 'black']), default='red', help='走子方')
def status(board_path: Optional[str], side: str):
    """显示将军/将死状态"""
    try:
        board = load_board(board_path)
    except XiangqiError as e:
        raise click.ClickException(str(e))

    game_status = get_game_status(board, side)
    table = Table(title="局面状态")
    table.add_column("项目")
    table.add_column("红方", justify="center")
    table.add_column("黑方", justify="center")
    table.add_row("被将军", *("是" if is_in_check(board, s) else "否" for s in Side))
    table.add_row("被将死", *("是" if is_checkmate(board, s) else "否" for s in Side))
    console.print(table)
    console.print(f"走子方: {'红方' if game_status['side_to_move'] is Side.RED else '黑方'}, "
                  f"合法走法数: {game_status['legal_moves_count']}")


@cli.command()
def info():
    """显示版本信息"""
    banner_text = Text()
    banner_text.append("Xiangqi Rules\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")
    console.print(Panel(banner_text, title="中国象棋规则引擎", border_style="blue", padding=(1, 2)))


def main():
    """主入口函数"""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
