"""In-memory fakes of the Google Cloud client handles."""
