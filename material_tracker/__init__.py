"""Material request tracker: requests, partial deliveries and fulfillment status."""

__version__ = "0.1.0"
