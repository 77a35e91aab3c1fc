"""Run orchestration for the scrape and build passes."""
