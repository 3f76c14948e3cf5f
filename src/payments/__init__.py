"""Payments: payment method branching and the gateway hand-off."""
