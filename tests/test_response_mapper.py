from __future__ import annotations

import unittest

from pydantic import ValidationError

from orca_api.domain.entities.time_period import TimePeriod
from orca_api.domain.exceptions import DecodeError
from orca_api.infrastructure.clients.response_mapper import decode_response
from orca_api.schemas.pagination import Paginated
from orca_api.schemas.pool import Whirlpool
from orca_api.schemas.protocol import (
    CirculatingSupplyResponse,
    ProtocolInfo,
    TokenInfo,
    TotalSupplyResponse,
)
from orca_api.schemas.token import LockInfo, Token

from orca_payloads import (
    ADAPTIVE_FEE,
    POOL_ADDRESS,
    PROTOCOL_INFO,
    TOKEN,
    TOKEN_INFO,
    dumps,
    paginated,
    whirlpool,
    whirlpool_with_unknown_period,
)


class ProtocolMappingTests(unittest.TestCase):
    def test_protocol_info_preserves_decimal_strings(self):
        body = (
            '{"fees24hUsdc":"317428.0521046","revenue24hUsdc":"41265.646773",'
            '"tvl":"230551269.0085","volume24hUsdc":"552567794.7830"}'
        )

        info = decode_response(body, ProtocolInfo)

        self.assertEqual(info.fees_24h_usdc, "317428.0521046")
        self.assertEqual(info.revenue_24h_usdc, "41265.646773")
        self.assertEqual(info.tvl, "230551269.0085")
        self.assertEqual(info.volume_24h_usdc, "552567794.7830")

    def test_protocol_info_missing_required_field_fails(self):
        payload = dict(PROTOCOL_INFO)
        payload.pop("tvl")

        with self.assertRaises(DecodeError) as ctx:
            decode_response(dumps(payload), ProtocolInfo)

        self.assertEqual(ctx.exception.target, "ProtocolInfo")
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)

    def test_unknown_extra_fields_are_ignored(self):
        payload = dict(PROTOCOL_INFO, newServerField={"anything": 1})
        info = decode_response(dumps(payload), ProtocolInfo)
        self.assertEqual(info.tvl, "230551269.0085")

    def test_wrong_type_fails(self):
        payload = dict(PROTOCOL_INFO, tvl=230551269.0085)
        with self.assertRaises(DecodeError):
            decode_response(dumps(payload), ProtocolInfo)

    def test_semantic_field_names_are_not_wire_keys(self):
        body = '{"fees_24h_usdc":"1","revenue_24h_usdc":"2","tvl":"3","volume_24h_usdc":"4"}'
        with self.assertRaises(DecodeError):
            decode_response(body, ProtocolInfo)

    def test_nested_semantic_field_name_is_not_a_wire_key(self):
        payload = dict(TOKEN_INFO, stats={"h24": {"volume": "1"}})
        with self.assertRaises(DecodeError):
            decode_response(dumps(payload), TokenInfo)

    def test_invalid_json_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(b"<html>bad gateway</html>", ProtocolInfo)

    def test_token_info_reads_24h_stats(self):
        info = decode_response(dumps(TOKEN_INFO), TokenInfo)
        self.assertEqual(info.name, "Orca")
        self.assertEqual(info.image_url, "https://arweave.net/orca.png")
        self.assertEqual(info.stats.h24.volume, "594947.6898176792")

    def test_supply_responses_use_snake_case_keys(self):
        circulating = decode_response(b'{"circulating_supply": "53275183"}', CirculatingSupplyResponse)
        total = decode_response(b'{"total_supply": "99999713"}', TotalSupplyResponse)
        self.assertEqual(circulating.circulating_supply, "53275183")
        self.assertEqual(total.total_supply, "99999713")

    def test_records_are_immutable(self):
        info = decode_response(dumps(PROTOCOL_INFO), ProtocolInfo)
        with self.assertRaises(ValidationError):
            info.tvl = "0"


class TokenMappingTests(unittest.TestCase):
    def test_empty_page_with_null_cursors(self):
        page = decode_response(dumps(paginated([])), Paginated[Token])
        self.assertEqual(page.data, [])
        self.assertIsNone(page.meta.next)
        self.assertIsNone(page.meta.previous)

    def test_missing_cursor_keys_are_absent(self):
        page = decode_response(b'{"data": [], "meta": {}}', Paginated[Token])
        self.assertIsNone(page.meta.next)
        self.assertIsNone(page.meta.previous)

    def test_missing_meta_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(b'{"data": []}', Paginated[Token])

    def test_token_page_keeps_opaque_fields_as_text(self):
        page = decode_response(dumps(paginated([TOKEN], next_cursor="cursor-2")), Paginated[Token])

        token = page.data[0]
        self.assertEqual(page.meta.next, "cursor-2")
        self.assertEqual(token.address, TOKEN["address"])
        self.assertEqual(token.decimals, 9)
        self.assertIsNone(token.freeze_authority)
        self.assertIsNone(token.mint_authority)
        self.assertTrue(token.is_initialized)
        self.assertEqual(token.extensions, "{}")
        self.assertEqual(token.tags, "[]")
        self.assertEqual(token.updated_epoch, 784)

    def test_opaque_text_is_kept_verbatim(self):
        raw = '{"name": "Wrapped SOL",  "score": 1.50}'
        token = decode_response(dumps(dict(TOKEN, metadata=raw)), Token)
        self.assertEqual(token.metadata, raw)

    def test_structured_opaque_field_fails(self):
        for key, value in (("metadata", {"a": 1.50}), ("tags", ["verified"]), ("extensions", {})):
            with self.subTest(key=key):
                with self.assertRaises(DecodeError):
                    decode_response(dumps(dict(TOKEN, **{key: value})), Token)

    def test_string_integer_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(dict(TOKEN, decimals="9")), Token)

    def test_string_boolean_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(dict(TOKEN, isInitialized="yes")), Token)
        with self.assertRaises(DecodeError):
            decode_response(dumps(dict(TOKEN, isInitialized="true")), Token)

    def test_null_opaque_field_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(dict(TOKEN, extensions=None)), Token)

    def test_authorities_may_be_omitted(self):
        payload = dict(TOKEN)
        payload.pop("freezeAuthority")
        payload.pop("mintAuthority")
        token = decode_response(dumps(payload), Token)
        self.assertIsNone(token.freeze_authority)

    def test_decimals_out_of_u8_range_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(dict(TOKEN, decimals=256)), Token)

    def test_lock_info_list(self):
        locks = decode_response(
            b'[{"lockedPercentage": "0.7", "name": "Whirlpool-Lock"}]',
            list[LockInfo],
        )
        self.assertEqual(len(locks), 1)
        self.assertEqual(locks[0].locked_percentage, "0.7")
        self.assertEqual(locks[0].name, "Whirlpool-Lock")


class WhirlpoolMappingTests(unittest.TestCase):
    def test_pool_without_adaptive_fee(self):
        pool = decode_response(dumps(whirlpool()), Whirlpool)

        self.assertEqual(pool.address, POOL_ADDRESS)
        self.assertFalse(pool.adaptive_fee_enabled)
        self.assertIsNone(pool.adaptive_fee)
        self.assertEqual(pool.tick_current_index, -19106)
        self.assertEqual(pool.token_vault_a, [1, 2, 3])
        self.assertEqual(pool.token_a.symbol, "SOL")
        self.assertEqual(pool.token_b.tags, '["stable"]')

    def test_pool_with_adaptive_fee(self):
        pool = decode_response(
            dumps(whirlpool(adaptiveFeeEnabled=True, adaptiveFee=ADAPTIVE_FEE)),
            Whirlpool,
        )

        self.assertIsNotNone(pool.adaptive_fee)
        assert pool.adaptive_fee is not None
        self.assertEqual(pool.adaptive_fee.current_rate, 4120)
        self.assertEqual(pool.adaptive_fee.constants.tick_group_size, 64)
        self.assertEqual(pool.adaptive_fee.variables.tick_group_index_reference, -299)

    def test_stats_are_keyed_by_time_period(self):
        pool = decode_response(dumps(whirlpool()), Whirlpool)

        self.assertEqual(set(pool.stats), {TimePeriod.H24, TimePeriod.H1})
        self.assertEqual(pool.stats[TimePeriod.H24].yield_over_tvl, "0.00041")
        self.assertEqual(pool.stats[TimePeriod("1h")].volume, "3040660.12")

    def test_unknown_stats_period_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(whirlpool_with_unknown_period()), Whirlpool)

    def test_rewards_keep_server_order(self):
        second = dict(whirlpool()["rewards"][0], mint="mint-2", active=True)
        pool = decode_response(dumps(whirlpool(rewards=[whirlpool()["rewards"][0], second])), Whirlpool)

        self.assertEqual([reward.mint for reward in pool.rewards], [
            "orcaEKTdK7LKz57vaAYr9QeNsVEPfiu6QeMU1kektZE",
            "mint-2",
        ])
        self.assertEqual(pool.rewards[0].emissions_per_second_x64, "0")
        self.assertTrue(pool.rewards[1].active)

    def test_locked_liquidity_may_be_null(self):
        pool = decode_response(dumps(whirlpool(lockedLiquidityPercent=None)), Whirlpool)
        self.assertIsNone(pool.locked_liquidity_percent)

    def test_locked_liquidity_records(self):
        pool = decode_response(dumps(whirlpool()), Whirlpool)
        assert pool.locked_liquidity_percent is not None
        self.assertEqual(pool.locked_liquidity_percent[0].name, "Whirlpool-Lock")

    def test_missing_nested_required_field_fails_whole_page(self):
        broken = whirlpool()
        broken["tokenA"].pop("programId")

        with self.assertRaises(DecodeError):
            decode_response(dumps(paginated([whirlpool(), broken])), Paginated[Whirlpool])

    def test_float_in_u32_field_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(whirlpool(feeRate=3000.0)), Whirlpool)

    def test_string_in_i32_field_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(whirlpool(tickCurrentIndex="-19106")), Whirlpool)

    def test_negative_fee_rate_fails(self):
        with self.assertRaises(DecodeError):
            decode_response(dumps(whirlpool(feeRate=-1)), Whirlpool)


if __name__ == "__main__":
    unittest.main()
