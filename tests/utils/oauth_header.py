import re


def parse_oauth_header(value: str) -> dict[str, str]:
    """Split an ``OAuth k="v",...`` Authorization value into its fields."""
    assert value.startswith("OAuth ")
    return dict(re.findall(r'(\w+)="([^"]*)"', value))
