import click

from cli.contract_session import handle_contract_errors, open_contract
from config.settings import settings
from utils.formatter_utils import parse_int_list


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-s", "--sender", default=settings.contract.owner_address, type=str, help="Address sending the transaction.")
@click.option("-r", "--recipient", required=True, type=str, help="Address receiving the book token.")
@click.option("-e", "--edition", required=True, type=int, help="Edition (print run) number.")
@click.option("-i", "--item", required=True, type=int, help="Copy number within the edition.")
@click.option("-o", "--output", default=settings.kafka.output, type=str, help="Event outputs, e.g. console or kafka/localhost:9092. Console if not specified.")
@handle_contract_errors
def mint(state_file, sender, recipient, edition, item, output):
    """Issues one copy of an edition to a recipient."""
    with open_contract(state_file, output=output) as session:
        token_id = session.contract.issue(sender, recipient, edition, item)
    click.echo(f"Minted token {token_id}")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-s", "--sender", default=settings.contract.owner_address, type=str, help="Address sending the transaction.")
@click.option("-r", "--recipient", required=True, type=str, help="Address receiving the book tokens.")
@click.option("-e", "--editions", required=True, type=str, help="Comma-separated editions, e.g. 1,1,2.")
@click.option("-i", "--items", required=True, type=str, help="Comma-separated items, one per edition, e.g. 1,2,1.")
@click.option("-o", "--output", default=settings.kafka.output, type=str, help="Event outputs, e.g. console or kafka/localhost:9092. Console if not specified.")
@handle_contract_errors
def mint_batch(state_file, sender, recipient, editions, items, output):
    """Issues several copies to one recipient, all or nothing."""
    try:
        edition_list = parse_int_list(editions)
        item_list = parse_int_list(items)
    except ValueError as e:
        raise click.BadParameter(f"editions and items must be comma-separated integers: {e}")

    with open_contract(state_file, output=output) as session:
        token_ids = session.contract.issue_batch(sender, recipient, edition_list, item_list)
    click.echo(f"Minted tokens {', '.join(str(token_id) for token_id in token_ids)}")
