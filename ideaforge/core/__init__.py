"""Core domain logic: exceptions, job states and payload codecs."""
