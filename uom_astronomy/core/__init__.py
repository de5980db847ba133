"""Core unit framework and exceptions"""
