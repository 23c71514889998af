"""
Memory Reading Parser Tests

Run all tests:
    pytest tests/ -v

Run specific test file:
    pytest tests/test_regions.py -v

Run with coverage:
    pytest tests/ -v --cov=memory_reading
"""
