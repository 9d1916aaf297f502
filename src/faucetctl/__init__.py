"""faucetctl — faucet configuration loader and KAS amount tooling."""

__version__ = "0.1.0"
