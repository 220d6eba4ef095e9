"""Starknet JSON-RPC client."""

from starkcall.rpc.client import JsonRpcClient

__all__ = ["JsonRpcClient"]
