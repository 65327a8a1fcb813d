"""
Test package for vcloud_director.

The tests run against FakeVCD (fixtures.py), an in-memory Cloud Director
served through httpx.MockTransport, so no site is needed.
"""
