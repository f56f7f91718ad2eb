"""In-memory stand-in for the vendor compute API type modules (compute, computealpha, computebeta)."""
