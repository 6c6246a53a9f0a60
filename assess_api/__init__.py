"""Scoring HTTP service"""
