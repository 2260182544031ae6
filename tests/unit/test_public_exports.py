from __future__ import annotations

import itops_api_client


def test_package_exports_clients_invokers_and_results():
    expected = {
        "ApiClient",
        "WemClient",
        "MijnHostClient",
        "AsyncApiClient",
        "ApiRequestInvoker",
        "AsyncApiRequestInvoker",
        "SessionContext",
        "RequestDescriptor",
        "Success",
        "Failure",
        "ErrorCategory",
    }
    assert expected.issubset(set(itops_api_client.__all__))
    for name in itops_api_client.__all__:
        assert hasattr(itops_api_client, name)


def test_package_does_not_export_internal_helpers():
    assert "prepare_request" not in itops_api_client.__all__
    assert not hasattr(itops_api_client, "prepare_request")
