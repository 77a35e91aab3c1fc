"""
Pipeline definitions for the job aggregator.

Two independent passes joined only by the raw-job file:
1. Scrape - classify each careers page, extract raw jobs, dedup, write
   raw_jobs.json and coverage.json
2. Build - normalize raw jobs, split clean/rejected, index by company,
   write the site datasets
"""
