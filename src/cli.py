import click
import requests
import uvicorn
from core.config import setting
from core.utils import generate_transaction_id


@click.group()
def cli():
    pass

@cli.command()
@click.option('--host', default=setting.host, help='Address to listen on')
@click.option('--port', default=setting.port, type=int, help='Port to listen on')
@click.option('--reload', is_flag=True, help='Restart the server on code changes')
def serve(host: str, port: int, reload: bool):
    """Run the transfer service."""
    uvicorn.run("app:app", host=host, port=port, reload=reload)

@cli.command()
@click.option('--from-account', type=str, default=None, help='Source account')
@click.option('--to-account', type=str, default=None, help='Destination account')
@click.option('--amount', type=float, default=0.0, help='Amount to transfer')
@click.option('--server-url', default=f"http://localhost:{setting.port}", help='Base URL of the transfer service')
def transfer(from_account: str, to_account: str, amount: float, server_url: str):
    """Send a transfer to a running service and print the reply."""
    response = requests.post(
        f"{server_url}/api/transfer",
        json={
            "fromAccount": from_account,
            "toAccount": to_account,
            "amount": amount,
        },
    )
    response.raise_for_status()
    if response.headers.get("content-type", "").startswith("application/json"):
        click.echo(response.json())
    else:
        click.echo(response.text)

@cli.command()
def transaction_id():
    """Print a transaction id for the current time."""
    click.echo(generate_transaction_id())

if __name__ == "__main__":
    cli()
