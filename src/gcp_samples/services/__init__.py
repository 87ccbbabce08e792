"""GCP Samples - Services Layer.

Sample operations for Container Analysis, Pub/Sub and the Healthcare API,
plus the credential and client plumbing they are called with.
"""
