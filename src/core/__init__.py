"""Core domain package for relay.

Core contains the forwarding filter and routing decision without any Telegram
or environment-specific code, keeping the business logic portable.
"""
