import click

from cli.contract_session import handle_contract_errors, open_contract
from config.settings import settings


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-s", "--sender", default=settings.contract.owner_address, type=str, help="Address sending the transaction.")
@click.option("-t", "--token-id", default=None, type=int, help="Token id whose URI is overridden.")
@click.option("-e", "--edition", default=None, type=int, help="Edition, used with --item instead of --token-id.")
@click.option("-i", "--item", default=None, type=int, help="Item, used with --edition instead of --token-id.")
@click.option("-u", "--uri", required=True, type=str, help="Explicit metadata URI for the token.")
@click.option("-o", "--output", default=settings.kafka.output, type=str, help="Event outputs, e.g. console or kafka/localhost:9092. Console if not specified.")
@handle_contract_errors
def set_token_uri(state_file, sender, token_id, edition, item, uri, output):
    """Overrides the metadata URI of one token."""
    with open_contract(state_file, output=output) as session:
        if token_id is not None:
            session.contract.set_override(sender, token_id, uri)
        elif edition is not None and item is not None:
            session.contract.set_override_by_parts(sender, edition, item, uri)
        else:
            raise click.UsageError("Provide either --token-id or both --edition and --item")
    click.echo(f"Token URI set to {uri}")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-s", "--sender", default=settings.contract.owner_address, type=str, help="Address sending the transaction.")
@click.option("-p", "--prefix", required=True, type=str, help="New default URI prefix, e.g. ipfs://<cid>/.")
@handle_contract_errors
def set_base_uri(state_file, sender, prefix):
    """Replaces the default URI prefix. Existing token URIs are kept."""
    with open_contract(state_file) as session:
        session.contract.set_default_prefix(sender, prefix)
    click.echo(f"Default URI prefix set to {prefix}")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-s", "--sender", default=settings.contract.owner_address, type=str, help="Address sending the transaction.")
@click.option("-n", "--new-owner", required=True, type=str, help="Address of the new administrator.")
@handle_contract_errors
def transfer_ownership(state_file, sender, new_owner):
    """Hands the administrator role over to another address."""
    with open_contract(state_file) as session:
        try:
            session.authorizer.transfer_ownership(sender, new_owner)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--new-owner")
    click.echo(f"Ownership transferred to {session.authorizer.current_administrator()}")


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-f", "--state-file", default=settings.contract.state_file, show_default=True, type=str, help="Path of the contract state file.")
@click.option("-a", "--account", required=True, type=str, help="Account to query.")
@click.option("-t", "--token-id", required=True, type=int, help="Token id to query.")
def balance_of(state_file, account, token_id):
    """Prints how many units of a token an account holds."""
    with open_contract(state_file, persist=False) as session:
        click.echo(session.contract.balance_of(account, token_id))
