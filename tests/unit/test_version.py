"""Test basic package functionality."""

import transport_chain


def test_version():
    """Test that package version is defined."""
    assert hasattr(transport_chain, "__version__")
    assert transport_chain.__version__ == "0.1.0"


def test_public_api():
    """Test that the decorators are importable from the package root."""
    assert transport_chain.KeyInjectingTransport is not None
    assert transport_chain.LoggingTransport is not None
    assert transport_chain.FlakyTransport is not None
    assert callable(transport_chain.create_transport_stack)
