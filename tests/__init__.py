"""
Test suite for the Laneful client.

Tests are organized by module:
    - test_models.py: request/response models and wire serialization
    - test_client.py: LanefulClient against a stubbed httpx transport
    - test_webhooks.py: webhook signature computation and verification
    - test_config.py: settings loading and client construction from settings

Test markers:
    - unit: Fast unit tests
    - integration: End-to-end client calls against a stub transport

Run tests:
    pytest                    # All tests
    pytest -m unit            # Unit tests only
"""
