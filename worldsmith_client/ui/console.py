#!/usr/bin/env python
# Console UI utilities
import os
from typing import Dict, List, Any, Optional, Tuple
from rich.console import Console
from rich.prompt import Prompt, Confirm, IntPrompt
from rich.panel import Panel
from rich.text import Text

# Initialize Rich console
console = Console()


def clear_screen():
    """Clear the terminal screen"""
    os.system('cls' if os.name == 'nt' else 'clear')


def show_title(title: str, subtitle: Optional[str] = None, style="bold magenta"):
    """Display a title panel"""
    clear_screen()

    title_panel = Panel(Text(title, style=style), expand=False)
    console.print(title_panel)

    if subtitle:
        console.print(f"\n{subtitle}\n")


def create_menu(title: str, options: List[Tuple[str, str]], subtitle: Optional[str] = None,
                exit_label: str = "Back"):
    """Display a numbered menu and return the selected option key"""
    console.print(Text(title, style="bold magenta"))
    if subtitle:
        console.print(f"[dim]{subtitle}[/dim]")

    for i, (key, description) in enumerate(options, 1):
        console.print(f"[cyan]{i}.[/cyan] {description}")

    console.print(f"[red]0.[/red] {exit_label}")

    while True:
        choice = IntPrompt.ask("Enter your choice", default=0)

        if choice == 0:
            return None
        elif 1 <= choice <= len(options):
            return options[choice - 1][0]
        else:
            console.print("[yellow]Invalid choice. Please try again.[/yellow]")


def show_error(message: str):
    """Display an error message"""
    console.print(f"[bold red]Error:[/bold red] {message}")


def show_success(message: str):
    """Display a success message"""
    console.print(f"[bold green]Success:[/bold green] {message}")


def show_warning(message: str):
    """Display a warning message"""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def show_info(message: str):
    """Display an info message"""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def prompt_input(field_name: str, description: Optional[str] = None, default: str = "",
                 choices: List[str] = None, multiline: bool = False) -> str:
    """Prompt for user input with consistent formatting"""
    if description:
        console.print(f"[bold]{description}[/bold]")

    if multiline:
        console.print("Enter text (press Enter twice to finish):")
        lines = []
        while True:
            line = input()
            if not line and (not lines or not lines[-1]):
                break
            lines.append(line)
        return "\n".join(lines).strip()

    if choices:
        return Prompt.ask(field_name, choices=choices, default=default)

    return Prompt.ask(field_name, default=default)


def confirm_action(prompt: str, default: bool = False) -> bool:
    """Ask for confirmation before performing an action"""
    return Confirm.ask(prompt, default=default)


def prompt_select_item(items: List[Dict[str, Any]], prompt_text: str, name_key: str = "name",
                       id_key: str = "id", allow_none: bool = True) -> Optional[Any]:
    """
    Display a list of items and prompt user to select one

    Returns:
        Selected item ID or None if cancelled
    """
    if not items:
        console.print("[yellow]No items available.[/yellow]")
        return None

    for i, item in enumerate(items, 1):
        console.print(f"[cyan]{i}.[/cyan] {item.get(name_key, 'Unknown')}")

    if allow_none:
        console.print("[yellow]0. None/Cancel[/yellow]")

    while True:
        choice = IntPrompt.ask(prompt_text, default=0)

        if choice == 0 and allow_none:
            return None
        elif 1 <= choice <= len(items):
            return items[choice - 1].get(id_key)
        else:
            console.print("[yellow]Invalid choice. Please try again.[/yellow]")
