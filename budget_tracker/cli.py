# budget_tracker/cli.py
import logging

import click
from dotenv import load_dotenv

from budget_tracker.config import load_config, resolve_log_level
from budget_tracker.core.accounts import get_account_class
from budget_tracker.core.errors import BudgetTrackerError, InvalidAmount
from budget_tracker.tracker import BudgetTracker
from budget_tracker.utils import non_negative_amount, to_decimal

logger = logging.getLogger(__name__)


class AmountParamType(click.ParamType):
    """Decimal amounts; negatives are rejected unless allow_negative is set."""

    name = "amount"

    def __init__(self, allow_negative=False):
        self.allow_negative = allow_negative

    def convert(self, value, param, ctx):
        try:
            if self.allow_negative:
                return to_decimal(value)
            return non_negative_amount(value)
        except InvalidAmount as e:
            self.fail(str(e), param, ctx)


AMOUNT = AmountParamType()
SIGNED_AMOUNT = AmountParamType(allow_negative=True)


class Menu:
    """
    The interactive loop. Reads everything through click prompts, so bad
    dates and amounts are re-asked by click before the tracker sees them.
    """

    def __init__(self, tracker, config):
        self.tracker = tracker
        self.config = config
        self.date_type = click.DateTime(formats=[config.get("date_format", "%Y-%m-%d")])
        self.options = {
            1: ("Set Budget", self.set_budget),
            2: ("Add Income", self.add_income),
            3: ("Add Expense", self.add_expense),
            4: ("View Budget Summary", self.view_summary),
            5: ("Create Account", self.create_account),
            6: ("Display Account Info", self.display_account),
            7: ("Exit", self.exit),
        }

    def print_menu(self):
        click.echo("\n--- Personal Budget Tracker ---")
        for number, (label, _) in self.options.items():
            click.echo(f"{number}. {label}")

    def run(self):
        running = True
        while running:
            self.print_menu()
            choice = click.prompt("Choose an option", type=int)
            option = self.options.get(choice)
            if option is None:
                click.echo("Invalid option. Please try again.")
                continue
            try:
                running = option[1]() is not False
            except BudgetTrackerError as e:
                logger.debug("Menu option %s failed: %s", choice, e)
                click.echo(str(e))

    def _prompt_date(self, text):
        return click.prompt(text, type=self.date_type).date()

    def _prompt_transaction(self):
        date = self._prompt_date("Date")
        amount = click.prompt("Amount", type=AMOUNT)
        description = click.prompt("Description", default="", show_default=False)
        return date, amount, description

    def _ready_for_transactions(self):
        if self.tracker.budget is None or self.tracker.account is None:
            click.echo("Please set the budget and create an account first.")
            return False
        return True

    def set_budget(self):
        start = self._prompt_date("Start date")
        end = self._prompt_date("End date")
        income = click.prompt("Income", type=AMOUNT)
        try:
            self.tracker.set_budget(start, end, income)
        except ValueError as e:
            click.echo(f"Error: {e}")
            return
        click.echo("Budget set successfully.")

    def add_income(self):
        if not self._ready_for_transactions():
            return
        self.tracker.add_income(*self._prompt_transaction())
        click.echo("Income added successfully.")

    def add_expense(self):
        if not self._ready_for_transactions():
            return
        self.tracker.add_expense(*self._prompt_transaction())
        click.echo("Expense added successfully.")
        if self.tracker.budget.is_exceeded():
            click.echo("Warning: You have exceeded your budget!")

    def view_summary(self):
        summary = self.tracker.summary()
        click.echo(str(summary))
        if self.tracker.budget.is_exceeded():
            click.echo("Budget exceeded!")

    def create_account(self):
        types = sorted(self.config.get("account_types", {}))
        account_type = click.prompt(
            "Account type", type=click.Choice(types, case_sensitive=False)
        )
        cls = get_account_class(account_type, self.config)
        number = click.prompt("Account number")
        balance = click.prompt("Initial balance", type=SIGNED_AMOUNT)
        attribute = click.prompt(cls.attribute_name.replace("_", " ").capitalize(), type=AMOUNT)
        self.tracker.create_account(account_type, number, balance, attribute)
        click.echo("Account created successfully.")

    def display_account(self):
        click.echo(str(self.tracker.account_info()))

    def exit(self):
        click.echo("Exiting the program. Goodbye!")
        return False


@click.command()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional YAML config file'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. with BUDGET_TRACKER_LOG_LEVEL'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging level (overrides env and config)'
)
def main(config_path, env_file, log_level):
    """
    Track one budget period and its accounts from an interactive menu.
    Nothing is saved between runs.
    """
    if env_file:
        load_dotenv(env_file)

    cfg = load_config(config_path)
    level = resolve_log_level(cfg, log_level)
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))

    Menu(BudgetTracker(cfg), cfg).run()
