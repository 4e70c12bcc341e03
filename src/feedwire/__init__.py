"""
feedwire - price feed data model and wire conversions

Defines the shapes a price feed update takes inside a process, in
client-facing JSON, and inside a binary proof envelope, plus the
conversions between them. No prices are computed, no signatures are
checked, and nothing here touches the network.
"""

__version__ = "0.1.0"
