# nosec B101


import pytest
from unittest.mock import Mock, AsyncMock
import httpx

from infrastructure.providers.coingecko import CryptoFiatProvider, CryptoPairProvider
from domain.exceptions.currency import NetworkError, NotFoundError, ParseError, ZeroRateError


def make_client(payload):
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_response = Mock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status = Mock()
    mock_client.get.return_value = mock_response
    return mock_client


# ============================================================================
# TEST: CryptoPairProvider
# ============================================================================

@pytest.mark.asyncio
async def test_pair_rate_divides_usd_prices():
    mock_client = make_client({
        'bitcoin': {'usd': 50000},
        'ethereum': {'usd': 2500},
    })

    provider = CryptoPairProvider(client=mock_client)
    rate = await provider.fetch_rate('bitcoin', 'ethereum')

    assert rate == 20.0
    call_args = mock_client.get.call_args
    assert call_args[0][0] == 'https://api.coingecko.com/api/v3/simple/price'
    assert call_args[1]['params'] == {'ids': 'bitcoin,ethereum', 'vs_currencies': 'usd'}


@pytest.mark.asyncio
async def test_pair_rate_missing_coin_is_not_found():
    mock_client = make_client({'bitcoin': {'usd': 50000}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(NotFoundError):
        await provider.fetch_rate('bitcoin', 'ethereum')


@pytest.mark.asyncio
async def test_pair_rate_missing_usd_quote_is_not_found():
    mock_client = make_client({'bitcoin': {'usd': 50000}, 'ethereum': {}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(NotFoundError):
        await provider.fetch_rate('bitcoin', 'ethereum')


@pytest.mark.asyncio
async def test_pair_rate_zero_target_price_is_explicit_failure():
    mock_client = make_client({'bitcoin': {'usd': 50000}, 'ethereum': {'usd': 0}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(ZeroRateError):
        await provider.fetch_rate('bitcoin', 'ethereum')


@pytest.mark.asyncio
async def test_pair_rate_error_body_is_parse_error():
    mock_client = make_client({'status': {'error_code': 429, 'error_message': 'rate limited'}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(ParseError):
        await provider.fetch_rate('bitcoin', 'ethereum')


@pytest.mark.asyncio
async def test_pair_rate_http_429_is_network_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)

    error_response = Mock()
    error_response.status_code = 429
    error_response.text = 'Too Many Requests'

    mock_client.get.side_effect = httpx.HTTPStatusError(
        'Rate limit',
        request=Mock(),
        response=error_response
    )

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(NetworkError) as exc_info:
        await provider.fetch_rate('bitcoin', 'ethereum')

    assert '429' in str(exc_info.value)


# ============================================================================
# TEST: CryptoFiatProvider
# ============================================================================

@pytest.mark.asyncio
async def test_fiat_price_queries_lowercase_fiat():
    mock_client = make_client({'the-open-network': {'rub': 512.4}})

    provider = CryptoFiatProvider(client=mock_client)
    price = await provider.fetch_price('the-open-network', 'RUB')

    assert price == 512.4
    call_args = mock_client.get.call_args
    assert call_args[1]['params'] == {'ids': 'the-open-network', 'vs_currencies': 'rub'}


@pytest.mark.asyncio
async def test_fiat_price_missing_quote_is_not_found():
    mock_client = make_client({'bitcoin': {'usd': 50000}})

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(NotFoundError) as exc_info:
        await provider.fetch_price('bitcoin', 'EUR')

    assert 'bitcoin' in str(exc_info.value)


@pytest.mark.asyncio
async def test_fiat_price_unknown_coin_is_not_found():
    mock_client = make_client({})

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(NotFoundError):
        await provider.fetch_price('NOTACOIN', 'USD')


@pytest.mark.asyncio
async def test_fiat_price_string_value_is_parse_error():
    mock_client = make_client({'bitcoin': {'usd': '50000'}})

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(ParseError):
        await provider.fetch_price('bitcoin', 'USD')


@pytest.mark.asyncio
async def test_fiat_price_zero_is_rejected():
    mock_client = make_client({'bitcoin': {'usd': 0}})

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(ZeroRateError):
        await provider.fetch_price('bitcoin', 'USD')


@pytest.mark.asyncio
async def test_fiat_price_connection_error():
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get.side_effect = httpx.ConnectError('Connection refused')

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(NetworkError) as exc_info:
        await provider.fetch_price('bitcoin', 'USD')

    assert 'coingecko request failed' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize('price', [float('nan'), float('inf')])
async def test_pair_rate_non_finite_price_is_parse_error(price):
    mock_client = make_client({'bitcoin': {'usd': price}, 'ethereum': {'usd': 2500}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(ParseError):
        await provider.fetch_rate('bitcoin', 'ethereum')


@pytest.mark.asyncio
async def test_pair_rate_overflowing_cross_rate_is_parse_error():
    mock_client = make_client({'bitcoin': {'usd': 1e308}, 'ethereum': {'usd': 1e-10}})

    provider = CryptoPairProvider(client=mock_client)
    with pytest.raises(ParseError) as exc_info:
        await provider.fetch_rate('bitcoin', 'ethereum')

    assert 'Non-finite cross rate' in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize('price', [float('nan'), float('inf')])
async def test_fiat_price_non_finite_is_parse_error(price):
    mock_client = make_client({'bitcoin': {'usd': price}})

    provider = CryptoFiatProvider(client=mock_client)
    with pytest.raises(ParseError):
        await provider.fetch_price('bitcoin', 'USD')
