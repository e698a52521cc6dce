"""Command-line experiments: self-play runs, variant comparison and benchmarks"""
