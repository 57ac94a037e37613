"""Alert delivery."""
from datadash.alerts.webhook import deliver_webhook, is_valid_https_url

__all__ = ["deliver_webhook", "is_valid_https_url"]
