#!/usr/bin/env python3
"""
Prepare a coin transfer and dry-run it against testnet04.
"""
import json
import logging
import os

from kadena_sdk import ApiClient, ApiConfig, Cap, Command, KadenaError, Keypair, Meta


def main():
    """
    Demonstrate basic usage of the SDK.

    This example shows how to:
    1. Load or generate a keypair
    2. Build metadata and capabilities for a transfer
    3. Prepare the signed command and run it with /local
    """
    logging.basicConfig(level=logging.INFO)

    network = os.environ.get("KADENA_NETWORK", "testnet04")
    chain_id = os.environ.get("KADENA_CHAIN_ID", "0")
    private_key = os.environ.get("KADENA_PRIVATE_KEY")

    keypair = Keypair.from_private_key(private_key) if private_key else Keypair.generate()
    sender = f"k:{keypair.public_key}"

    meta = (
        Meta.new(chain_id, sender)
        .with_gas_limit(1500)
        .with_gas_price(0.00000001)
        .with_ttl(3600)
    )
    caps = [
        Cap.new("coin.GAS"),
        Cap.transfer(sender, "Bob", 10.0),
    ]

    cmd = Command.prepare_exec(
        [(keypair, caps)],
        None,
        None,
        f'(coin.transfer "{sender}" "Bob" 10.0)',
        None,
        meta,
        network,
    )

    print("Transaction Payload:")
    print(json.dumps(cmd.to_request(), indent=2))

    client = ApiClient(ApiConfig.for_network(network, chain_id).with_timeout(60))
    try:
        result = client.local(cmd)
        print("\nTransaction Response:")
        print(json.dumps(result, indent=2))
    except KadenaError as e:
        print(f"Error running command: {str(e)}")


if __name__ == "__main__":
    main()
