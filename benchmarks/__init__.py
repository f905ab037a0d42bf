"""Benchmarks for digraph algorithms."""
