"""
Bounty validation core - field policy, composite rules and record validators.
"""
