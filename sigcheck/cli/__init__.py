"""sigcheck command-line interface"""
