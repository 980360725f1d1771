"""
End-to-end tests for the capo command.

All tests in this directory are marked with @pytest.mark.e2e and run
the command through the Click test runner.
"""
