"""Softblaze storefront: per-request locale, SEO and session resolution."""
