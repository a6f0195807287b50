"""
AWS CDK entry point for React Server hosting.

Synthesizes the ReactServerStack from environment settings; run through
the CDK toolkit from this directory.
"""
