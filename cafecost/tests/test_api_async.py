import pytest
from httpx import ASGITransport, AsyncClient

from cafecost.api.api_run import app


@pytest.mark.asyncio
async def test_tax_estimate_refund_over_http():
    """A month where purchases outweigh sales reports a VAT refund."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tax/estimate", json={
            "period": "monthly",
            "sales_amount": 1100000,
            "purchase_amount": 3300000,
        })
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_refund"] is True
    assert data["vat_payable"] == pytest.approx(-200000)

    # invalid mode is rejected by validation
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/api/tax/estimate", json={"sales_mode": "sometimes"})
    assert resp.status_code == 422
