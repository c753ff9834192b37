"""
Terminal prompts for the Database Admin Console.

This module defines the Prompter interface the wizard talks to and the
ConsolePrompter implementation built on Rich and prompt_toolkit.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

import click
from prompt_toolkit import prompt as pt_prompt
from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.text import Text


Validator = Callable[[str], bool]


class Prompter(ABC):
    """Interface for rendering prompts and reading answers."""
    
    @abstractmethod
    def select_from_menu(self, title: str, options: Sequence[str], default: Optional[str] = None) -> str:
        """Show a numbered menu and return the chosen option."""
        pass
    
    @abstractmethod
    def ask_text(
        self,
        prompt: str,
        default: Optional[str] = None,
        validator: Optional[Validator] = None,
        error_label: Optional[str] = None
    ) -> str:
        """Ask for free text, re-prompting until ``validator`` accepts it."""
        pass
    
    @abstractmethod
    def ask_password(self, prompt: str) -> str:
        pass
    
    @abstractmethod
    def ask_yes_no(self, prompt: str) -> bool:
        pass
    
    @abstractmethod
    def say(self, text: str) -> None:
        pass
    
    @abstractmethod
    def clear_screen(self) -> None:
        pass
    
    @abstractmethod
    def wait_for_key(self) -> None:
        """Block until the user presses a key."""
        pass


class ConsolePrompter(Prompter):
    """Prompter that reads from the terminal with Rich formatting."""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
    
    def select_from_menu(self, title: str, options: Sequence[str], default: Optional[str] = None) -> str:
        self.console.print(Text(title, style="bold"))
        self.console.print()
        for index, option in enumerate(options, 1):
            self.console.print(f"{index}) {option}", markup=False, highlight=False)
        self.console.print()
        
        default_choice = str(list(options).index(default) + 1) if default in options else None
        ask_kwargs = {"console": self.console}
        if default_choice:
            ask_kwargs["default"] = default_choice
        
        while True:
            answer = (Prompt.ask(f"[cyan]Choose the {escape(title.lower())}[/cyan]", **ask_kwargs) or "").strip()
            if not answer and default_choice:
                answer = default_choice
            
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            
            # Accept the option text itself as well as its number
            for option in options:
                if option.lower() == answer.lower():
                    return option
            
            self.console.print(f"[red]Invalid selection. Enter a number from 1 to {len(options)}.[/red]")
    
    def ask_text(
        self,
        prompt: str,
        default: Optional[str] = None,
        validator: Optional[Validator] = None,
        error_label: Optional[str] = None
    ) -> str:
        ask_kwargs = {"console": self.console}
        if default is not None:
            ask_kwargs["default"] = default
        
        while True:
            answer = (Prompt.ask(f"Enter the {escape(prompt)}", **ask_kwargs) or "").strip()
            if not answer and default is not None:
                answer = default
            
            if validator is None or validator(answer):
                return answer
            
            self.console.print(Text(f"Please provide {error_label or 'a valid value'}", style="red"))
    
    def ask_password(self, prompt: str) -> str:
        return pt_prompt(f"Enter the {prompt}: ", is_password=True)
    
    def ask_yes_no(self, prompt: str) -> bool:
        return Confirm.ask(escape(prompt), console=self.console)
    
    def say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)
    
    def clear_screen(self) -> None:
        self.console.clear()
    
    def wait_for_key(self) -> None:
        self.console.print("\nPress any key to continue.", markup=False, highlight=False)
        click.getchar()
