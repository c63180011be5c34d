"""
Storefront API package.
"""
