"""DEX labels accepted by the quote endpoint's dexes/excludeDexes filters."""

from enum import StrEnum


class DexEnum(StrEnum):
    WOOFI = "Woofi"
    PUMP_FUN = "Pump.fun"
    WHIRLPOOL = "Whirlpool"
    VIRTUALS = "Virtuals"
    DAOS_FUN = "Daos.fun"
    LIFINITY_V2 = "Lifinity V2"
    STABBLE_STABLE_SWAP = "Stabble Stable Swap"
    TOKEN_MILL = "Token Mill"
    METEORA = "Meteora"
    OASIS = "Oasis"
    ALDRIN = "Aldrin"
    GOOSE_FX_GAMMA = "GooseFX GAMMA"
    PERPS = "Perps"
    SOL_FI = "SolFi"
    DEX_LAB = "DexLab"
    TOKEN_SWAP = "Token Swap"
    ZERO_FI = "ZeroFi"
    CROPPER = "Cropper"
    OBRIC_V2 = "Obric V2"
    STABBLE_WEIGHTED_SWAP = "Stabble Weighted Swap"
    SANCTUM_INFINITY = "Sanctum Infinity"
    MOONIT = "Moonit"
    SANCTUM = "Sanctum"
    RAYDIUM_CP = "Raydium CP"
    PHOENIX = "Phoenix"
    PUMP_FUN_AMM = "Pump.fun Amm"
    SABER = "Saber"
    SABER_DECIMALS = "Saber (Decimals)"
    RAYDIUM_CLMM = "Raydium CLMM"
    DEX1 = "1DEX"
    PENGUIN = "Penguin"
    ORCA_V2 = "Orca V2"
    FLUX_BEAM = "FluxBeam"
    RAYDIUM = "Raydium"
    METEORA_DLMM = "Meteora DLMM"
    BONKSWAP = "Bonkswap"
    SOLAYER = "Solayer"
    STEPN = "StepN"
    HELIUM_NETWORK = "Helium Network"
    MERCURIAL = "Mercurial"
    PERENA = "Perena"
    ORCA_V1 = "Orca V1"
    ALDRIN_V2 = "Aldrin V2"
    SAROS = "Saros"
    OPEN_BOOK_V2 = "OpenBook V2"
    CREMA = "Crema"
    OPEN_BOOK = "Openbook"
    INVARIANT = "Invariant"
    GUACSWAP = "Guacswap"
