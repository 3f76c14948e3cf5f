"""Ordering bounded context: checkout of a basket of catalog items."""
