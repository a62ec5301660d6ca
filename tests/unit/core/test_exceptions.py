"""
Tests for the exception hierarchy
"""
from core.exceptions import ShopAuditError, ValidationError
from d0_gateway.exceptions import FetchError, FetchNetworkError, FetchStatusError, FetchTimeoutError


class TestShopAuditError:
    def test_defaults(self):
        error = ShopAuditError("Something broke")

        assert error.status_code == 500
        assert error.to_dict() == {"error": "SHOPAUDIT_ERROR", "message": "Something broke", "details": {}}

    def test_instance_overrides(self):
        error = ShopAuditError("Teapot", error_code="TEAPOT", status_code=418, details={"pot": "tea"})

        assert error.status_code == 418
        assert error.to_dict()["error"] == "TEAPOT"
        assert ShopAuditError.status_code == 500

    def test_validation_error(self):
        error = ValidationError("URL is required", field="url")

        assert isinstance(error, ShopAuditError)
        assert error.status_code == 400
        assert error.details == {"field": "url"}
        assert str(error) == "URL is required"


class TestFetchErrors:
    def test_all_fetch_errors_share_a_base(self):
        for error in (
            FetchNetworkError("https://shop.example.com/", "refused"),
            FetchTimeoutError("https://shop.example.com/", 5.0),
            FetchStatusError("https://shop.example.com/", 500),
        ):
            assert isinstance(error, FetchError)
            assert error.details["url"] == "https://shop.example.com/"

    def test_status_codes(self):
        assert FetchNetworkError("u", "refused").status_code == 502
        assert FetchTimeoutError("u", 5.0).status_code == 504
        assert FetchStatusError("u", 404).to_dict()["details"] == {"url": "u", "http_status": 404}
