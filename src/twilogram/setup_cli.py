"""Interactive first-run setup.

Collects Twilio and Deepgram credentials, writes them to `.env` and prints
the remaining manual steps (tunnel, Twilio number webhook, forwarding).
"""

import argparse
import importlib.util
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from rich.console import Console
from rich.prompt import Prompt

console = Console()

DEFAULT_PORT = "8080"

# Prompt label -> .env key, in file order
ENV_KEYS = {
    "Twilio Account SID": "TWILIO_ACCOUNT_SID",
    "Twilio Auth Token": "TWILIO_AUTH_TOKEN",
    "Deepgram API Key": "DEEPGRAM_API_KEY",
    "Port": "PORT",
}


def validate_env_values(values: Mapping[str, Optional[str]]) -> None:
    """Raise ValueError naming every key whose value is empty."""
    missing = [key for key, value in values.items() if not value or not value.strip()]
    if missing:
        raise ValueError(f"Missing required values for: {', '.join(missing)}")


def render_env_file(values: Mapping[str, str]) -> str:
    return "\n".join(f"{key}={value.strip()}" for key, value in values.items()) + "\n"


def check_prerequisites() -> bool:
    if sys.version_info < (3, 10):
        console.print("[red]Error: Python 3.10 or newer is required.[/red]")
        return False
    if importlib.util.find_spec("pip") is None:
        console.print("[red]Error: pip is required. Please install it before running the setup.[/red]")
        return False
    console.print("  > Python and pip found.")
    return True


def prompt_for_values() -> Dict[str, str]:
    console.print("  > Please provide your API credentials.")
    values: Dict[str, str] = {}
    for label, key in ENV_KEYS.items():
        if key == "PORT":
            values[key] = Prompt.ask("  Enter the port for the server", default=DEFAULT_PORT)
        else:
            values[key] = Prompt.ask(f"  Enter your {label}", password=key == "TWILIO_AUTH_TOKEN")
    return values


def print_instructions(port: str) -> None:
    console.print("\n[green][Step 3/3] Configuration Instructions:[/green]")
    console.print("Your project is set up! To run it, follow these steps:")

    console.print("\n1. Start a tunnel to expose your local server to the internet.")
    console.print("   We recommend ngrok:")
    console.print(f"   [yellow]ngrok http {port}[/yellow]")
    console.print("   Copy the HTTPS URL provided by ngrok (e.g., https://1234abcd.ngrok.io).")

    console.print("\n2. Configure your Twilio Phone Number:")
    console.print("   - Log in to your Twilio Console.")
    console.print("   - Go to Phone Numbers > Manage > Active Numbers and select your number.")
    console.print('   - Scroll to "Voice & Fax". For "A CALL COMES IN", select "Webhook".')
    console.print("   - Paste your ngrok URL with the /voice path into the text box.")
    console.print("     Example: [yellow]https://1234abcd.ngrok.io/voice[/yellow]")
    console.print('   - Ensure the method is set to "HTTP POST" and save.')

    console.print("\n3. (Optional) Configure Google Voice Forwarding:")
    console.print("   - In Google Voice, go to Settings > Calls > Call forwarding.")
    console.print("   - Add your Twilio phone number as a forwarding number.")

    console.print("\n[green]--- Setup Complete ---[/green]")
    console.print("You can now start the server by running:")
    console.print("  [yellow]twilogram[/yellow]")


def setup(env_path: Path) -> int:
    console.print("[green]--- Starting Automated Setup for TwiloGram ---[/green]")

    console.print("\n[Step 1/3] Checking for prerequisites...")
    if not check_prerequisites():
        return 1

    console.print("\n[Step 2/3] Setting up environment variables...")
    port = DEFAULT_PORT
    if env_path.exists():
        console.print(f"[yellow]  > {env_path} already exists. Skipping creation.[/yellow]")
    else:
        values = prompt_for_values()
        try:
            validate_env_values(values)
        except ValueError as exc:
            console.print(f"\n[red]An error occurred during setup: {exc}[/red]")
            return 1
        env_path.write_text(render_env_file(values), encoding="utf-8")
        port = values["PORT"].strip()
        console.print(f"[green]  > {env_path} created successfully.[/green]")

    print_instructions(port)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Create the TwiloGram .env file.")
    parser.add_argument("--env-file", type=Path, default=Path(".env"), help="path of the file to write")
    args = parser.parse_args(argv)
    sys.exit(setup(args.env_file))


if __name__ == "__main__":
    main()
