"""
Generated classification data. Do not edit by hand.

Derived from the Unicode Character Database, version 17.0. Codepoints are
grouped into power-of-two buckets: ``[0x0, 0x7F]``, ``[0x80, 0xFF]``,
``[0x100, 0x1FF]`` and so on up to ``[0x100000, 0x1FFFFF]``. Each bucket is a
sorted tuple of disjoint inclusive ``(low, high, kind)`` ranges; anything not
covered is ``ControlKind.NORMAL``.
"""

from typing import Final

from .types import ControlKind

type Range = tuple[int, int, ControlKind]

C: Final = ControlKind.CONTROL
F: Final = ControlKind.FORMAT

UNICODE_VERSION: Final[str] = "17.0.0"

BUCKETS: Final[tuple[tuple[Range, ...], ...]] = (
    # 0x0000...0x007F
    (
        (0x0000, 0x001F, C),
        (0x007F, 0x007F, C),
    ),
    # 0x0080...0x00FF
    (
        (0x0080, 0x009F, C),
        (0x00AD, 0x00AD, F),
    ),
    # 0x0100...0x01FF
    (),
    # 0x0200...0x03FF
    (
        (0x0378, 0x0379, C),
        (0x0380, 0x0383, C),
        (0x038B, 0x038B, C),
        (0x038D, 0x038D, C),
        (0x03A2, 0x03A2, C),
    ),
    # 0x0400...0x07FF
    (
        (0x0530, 0x0530, C),
        (0x0557, 0x0558, C),
        (0x058B, 0x058C, C),
        (0x0590, 0x0590, C),
        (0x05C8, 0x05CF, C),
        (0x05EB, 0x05EE, C),
        (0x05F5, 0x05FF, C),
        (0x0600, 0x0605, F),
        (0x061C, 0x061C, F),
        (0x06DD, 0x06DD, F),
        (0x070E, 0x070E, C),
        (0x070F, 0x070F, F),
        (0x074B, 0x074C, C),
        (0x07B2, 0x07BF, C),
        (0x07FB, 0x07FC, C),
    ),
    # 0x0800...0x0FFF
    (
        (0x082E, 0x082F, C),
        (0x083F, 0x083F, C),
        (0x085C, 0x085D, C),
        (0x085F, 0x085F, C),
        (0x086B, 0x086F, C),
        (0x088F, 0x088F, C),
        (0x0890, 0x0891, F),
        (0x0892, 0x0896, C),
        (0x08E2, 0x08E2, F),
        (0x0984, 0x0984, C),
        (0x098D, 0x098E, C),
        (0x0991, 0x0992, C),
        (0x09A9, 0x09A9, C),
        (0x09B1, 0x09B1, C),
        (0x09B3, 0x09B5, C),
        (0x09BA, 0x09BB, C),
        (0x09C5, 0x09C6, C),
        (0x09C9, 0x09CA, C),
        (0x09CF, 0x09D6, C),
        (0x09D8, 0x09DB, C),
        (0x09DE, 0x09DE, C),
        (0x09E4, 0x09E5, C),
        (0x09FF, 0x0A00, C),
        (0x0A04, 0x0A04, C),
        (0x0A0B, 0x0A0E, C),
        (0x0A11, 0x0A12, C),
        (0x0A29, 0x0A29, C),
        (0x0A31, 0x0A31, C),
        (0x0A34, 0x0A34, C),
        (0x0A37, 0x0A37, C),
        (0x0A3A, 0x0A3B, C),
        (0x0A3D, 0x0A3D, C),
        (0x0A43, 0x0A46, C),
        (0x0A49, 0x0A4A, C),
        (0x0A4E, 0x0A50, C),
        (0x0A52, 0x0A58, C),
        (0x0A5D, 0x0A5D, C),
        (0x0A5F, 0x0A65, C),
        (0x0A77, 0x0A80, C),
        (0x0A84, 0x0A84, C),
        (0x0A8E, 0x0A8E, C),
        (0x0A92, 0x0A92, C),
        (0x0AA9, 0x0AA9, C),
        (0x0AB1, 0x0AB1, C),
        (0x0AB4, 0x0AB4, C),
        (0x0ABA, 0x0ABB, C),
        (0x0AC6, 0x0AC6, C),
        (0x0ACA, 0x0ACA, C),
        (0x0ACE, 0x0ACF, C),
        (0x0AD1, 0x0ADF, C),
        (0x0AE4, 0x0AE5, C),
        (0x0AF2, 0x0AF8, C),
        (0x0B00, 0x0B00, C),
        (0x0B04, 0x0B04, C),
        (0x0B0D, 0x0B0E, C),
        (0x0B11, 0x0B12, C),
        (0x0B29, 0x0B29, C),
        (0x0B31, 0x0B31, C),
        (0x0B34, 0x0B34, C),
        (0x0B3A, 0x0B3B, C),
        (0x0B45, 0x0B46, C),
        (0x0B49, 0x0B4A, C),
        (0x0B4E, 0x0B54, C),
        (0x0B58, 0x0B5B, C),
        (0x0B5E, 0x0B5E, C),
        (0x0B64, 0x0B65, C),
        (0x0B78, 0x0B81, C),
        (0x0B84, 0x0B84, C),
        (0x0B8B, 0x0B8D, C),
        (0x0B91, 0x0B91, C),
        (0x0B96, 0x0B98, C),
        (0x0B9B, 0x0B9B, C),
        (0x0B9D, 0x0B9D, C),
        (0x0BA0, 0x0BA2, C),
        (0x0BA5, 0x0BA7, C),
        (0x0BAB, 0x0BAD, C),
        (0x0BBA, 0x0BBD, C),
        (0x0BC3, 0x0BC5, C),
        (0x0BC9, 0x0BC9, C),
        (0x0BCE, 0x0BCF, C),
        (0x0BD1, 0x0BD6, C),
        (0x0BD8, 0x0BE5, C),
        (0x0BFB, 0x0BFF, C),
        (0x0C0D, 0x0C0D, C),
        (0x0C11, 0x0C11, C),
        (0x0C29, 0x0C29, C),
        (0x0C3A, 0x0C3B, C),
        (0x0C45, 0x0C45, C),
        (0x0C49, 0x0C49, C),
        (0x0C4E, 0x0C54, C),
        (0x0C57, 0x0C57, C),
        (0x0C5B, 0x0C5C, C),
        (0x0C5E, 0x0C5F, C),
        (0x0C64, 0x0C65, C),
        (0x0C70, 0x0C76, C),
        (0x0C8D, 0x0C8D, C),
        (0x0C91, 0x0C91, C),
        (0x0CA9, 0x0CA9, C),
        (0x0CB4, 0x0CB4, C),
        (0x0CBA, 0x0CBB, C),
        (0x0CC5, 0x0CC5, C),
        (0x0CC9, 0x0CC9, C),
        (0x0CCE, 0x0CD4, C),
        (0x0CD7, 0x0CDC, C),
        (0x0CDF, 0x0CDF, C),
        (0x0CE4, 0x0CE5, C),
        (0x0CF0, 0x0CF0, C),
        (0x0CF4, 0x0CFF, C),
        (0x0D0D, 0x0D0D, C),
        (0x0D11, 0x0D11, C),
        (0x0D45, 0x0D45, C),
        (0x0D49, 0x0D49, C),
        (0x0D50, 0x0D53, C),
        (0x0D64, 0x0D65, C),
        (0x0D80, 0x0D80, C),
        (0x0D84, 0x0D84, C),
        (0x0D97, 0x0D99, C),
        (0x0DB2, 0x0DB2, C),
        (0x0DBC, 0x0DBC, C),
        (0x0DBE, 0x0DBF, C),
        (0x0DC7, 0x0DC9, C),
        (0x0DCB, 0x0DCE, C),
        (0x0DD5, 0x0DD5, C),
        (0x0DD7, 0x0DD7, C),
        (0x0DE0, 0x0DE5, C),
        (0x0DF0, 0x0DF1, C),
        (0x0DF5, 0x0E00, C),
        (0x0E3B, 0x0E3E, C),
        (0x0E5C, 0x0E80, C),
        (0x0E83, 0x0E83, C),
        (0x0E85, 0x0E85, C),
        (0x0E8B, 0x0E8B, C),
        (0x0EA4, 0x0EA4, C),
        (0x0EA6, 0x0EA6, C),
        (0x0EBE, 0x0EBF, C),
        (0x0EC5, 0x0EC5, C),
        (0x0EC7, 0x0EC7, C),
        (0x0ECF, 0x0ECF, C),
        (0x0EDA, 0x0EDB, C),
        (0x0EE0, 0x0EFF, C),
        (0x0F48, 0x0F48, C),
        (0x0F6D, 0x0F70, C),
        (0x0F98, 0x0F98, C),
        (0x0FBD, 0x0FBD, C),
        (0x0FCD, 0x0FCD, C),
        (0x0FDB, 0x0FFF, C),
    ),
    # 0x1000...0x1FFF
    (
        (0x10C6, 0x10C6, C),
        (0x10C8, 0x10CC, C),
        (0x10CE, 0x10CF, C),
        (0x1249, 0x1249, C),
        (0x124E, 0x124F, C),
        (0x1257, 0x1257, C),
        (0x1259, 0x1259, C),
        (0x125E, 0x125F, C),
        (0x1289, 0x1289, C),
        (0x128E, 0x128F, C),
        (0x12B1, 0x12B1, C),
        (0x12B6, 0x12B7, C),
        (0x12BF, 0x12BF, C),
        (0x12C1, 0x12C1, C),
        (0x12C6, 0x12C7, C),
        (0x12D7, 0x12D7, C),
        (0x1311, 0x1311, C),
        (0x1316, 0x1317, C),
        (0x135B, 0x135C, C),
        (0x137D, 0x137F, C),
        (0x139A, 0x139F, C),
        (0x13F6, 0x13F7, C),
        (0x13FE, 0x13FF, C),
        (0x169D, 0x169F, C),
        (0x16F9, 0x16FF, C),
        (0x1716, 0x171E, C),
        (0x1737, 0x173F, C),
        (0x1754, 0x175F, C),
        (0x176D, 0x176D, C),
        (0x1771, 0x1771, C),
        (0x1774, 0x177F, C),
        (0x17DE, 0x17DF, C),
        (0x17EA, 0x17EF, C),
        (0x17FA, 0x17FF, C),
        (0x180E, 0x180E, F),
        (0x181A, 0x181F, C),
        (0x1879, 0x187F, C),
        (0x18AB, 0x18AF, C),
        (0x18F6, 0x18FF, C),
        (0x191F, 0x191F, C),
        (0x192C, 0x192F, C),
        (0x193C, 0x193F, C),
        (0x1941, 0x1943, C),
        (0x196E, 0x196F, C),
        (0x1975, 0x197F, C),
        (0x19AC, 0x19AF, C),
        (0x19CA, 0x19CF, C),
        (0x19DB, 0x19DD, C),
        (0x1A1C, 0x1A1D, C),
        (0x1A5F, 0x1A5F, C),
        (0x1A7D, 0x1A7E, C),
        (0x1A8A, 0x1A8F, C),
        (0x1A9A, 0x1A9F, C),
        (0x1AAE, 0x1AAF, C),
        (0x1ACF, 0x1AFF, C),
        (0x1B4D, 0x1B4D, C),
        (0x1BF4, 0x1BFB, C),
        (0x1C38, 0x1C3A, C),
        (0x1C4A, 0x1C4C, C),
        (0x1C8B, 0x1C8F, C),
        (0x1CBB, 0x1CBC, C),
        (0x1CC8, 0x1CCF, C),
        (0x1CFB, 0x1CFF, C),
        (0x1F16, 0x1F17, C),
        (0x1F1E, 0x1F1F, C),
        (0x1F46, 0x1F47, C),
        (0x1F4E, 0x1F4F, C),
        (0x1F58, 0x1F58, C),
        (0x1F5A, 0x1F5A, C),
        (0x1F5C, 0x1F5C, C),
        (0x1F5E, 0x1F5E, C),
        (0x1F7E, 0x1F7F, C),
        (0x1FB5, 0x1FB5, C),
        (0x1FC5, 0x1FC5, C),
        (0x1FD4, 0x1FD5, C),
        (0x1FDC, 0x1FDC, C),
        (0x1FF0, 0x1FF1, C),
        (0x1FF5, 0x1FF5, C),
        (0x1FFF, 0x1FFF, C),
    ),
    # 0x2000...0x3FFF
    (
        (0x200B, 0x200F, F),
        (0x202A, 0x202E, F),
        (0x2060, 0x2064, F),
        (0x2065, 0x2065, C),
        (0x2066, 0x206F, F),
        (0x2072, 0x2073, C),
        (0x208F, 0x208F, C),
        (0x209D, 0x209F, C),
        (0x20C1, 0x20CF, C),
        (0x20F1, 0x20FF, C),
        (0x218C, 0x218F, C),
        (0x242A, 0x243F, C),
        (0x244B, 0x245F, C),
        (0x2B74, 0x2B75, C),
        (0x2B96, 0x2B96, C),
        (0x2CF4, 0x2CF8, C),
        (0x2D26, 0x2D26, C),
        (0x2D28, 0x2D2C, C),
        (0x2D2E, 0x2D2F, C),
        (0x2D68, 0x2D6E, C),
        (0x2D71, 0x2D7E, C),
        (0x2D97, 0x2D9F, C),
        (0x2DA7, 0x2DA7, C),
        (0x2DAF, 0x2DAF, C),
        (0x2DB7, 0x2DB7, C),
        (0x2DBF, 0x2DBF, C),
        (0x2DC7, 0x2DC7, C),
        (0x2DCF, 0x2DCF, C),
        (0x2DD7, 0x2DD7, C),
        (0x2DDF, 0x2DDF, C),
        (0x2E5E, 0x2E7F, C),
        (0x2E9A, 0x2E9A, C),
        (0x2EF4, 0x2EFF, C),
        (0x2FD6, 0x2FEF, C),
        (0x3040, 0x3040, C),
        (0x3097, 0x3098, C),
        (0x3100, 0x3104, C),
        (0x3130, 0x3130, C),
        (0x318F, 0x318F, C),
        (0x31E6, 0x31EE, C),
        (0x321F, 0x321F, C),
    ),
    # 0x4000...0x7FFF
    (),
    # 0x8000...0xFFFF
    (
        (0xA48D, 0xA48F, C),
        (0xA4C7, 0xA4CF, C),
        (0xA62C, 0xA63F, C),
        (0xA6F8, 0xA6FF, C),
        (0xA7CE, 0xA7CF, C),
        (0xA7D2, 0xA7D2, C),
        (0xA7D4, 0xA7D4, C),
        (0xA7DD, 0xA7F1, C),
        (0xA82D, 0xA82F, C),
        (0xA83A, 0xA83F, C),
        (0xA878, 0xA87F, C),
        (0xA8C6, 0xA8CD, C),
        (0xA8DA, 0xA8DF, C),
        (0xA954, 0xA95E, C),
        (0xA97D, 0xA97F, C),
        (0xA9CE, 0xA9CE, C),
        (0xA9DA, 0xA9DD, C),
        (0xA9FF, 0xA9FF, C),
        (0xAA37, 0xAA3F, C),
        (0xAA4E, 0xAA4F, C),
        (0xAA5A, 0xAA5B, C),
        (0xAAC3, 0xAADA, C),
        (0xAAF7, 0xAB00, C),
        (0xAB07, 0xAB08, C),
        (0xAB0F, 0xAB10, C),
        (0xAB17, 0xAB1F, C),
        (0xAB27, 0xAB27, C),
        (0xAB2F, 0xAB2F, C),
        (0xAB6C, 0xAB6F, C),
        (0xABEE, 0xABEF, C),
        (0xABFA, 0xABFF, C),
        (0xD7A4, 0xD7AF, C),
        (0xD7C7, 0xD7CA, C),
        (0xD7FC, 0xF8FF, C),
        (0xFA6E, 0xFA6F, C),
        (0xFADA, 0xFAFF, C),
        (0xFB07, 0xFB12, C),
        (0xFB18, 0xFB1C, C),
        (0xFB37, 0xFB37, C),
        (0xFB3D, 0xFB3D, C),
        (0xFB3F, 0xFB3F, C),
        (0xFB42, 0xFB42, C),
        (0xFB45, 0xFB45, C),
        (0xFBC3, 0xFBD2, C),
        (0xFD90, 0xFD91, C),
        (0xFDC8, 0xFDCE, C),
        (0xFDD0, 0xFDEF, C),
        (0xFE1A, 0xFE1F, C),
        (0xFE53, 0xFE53, C),
        (0xFE67, 0xFE67, C),
        (0xFE6C, 0xFE6F, C),
        (0xFE75, 0xFE75, C),
        (0xFEFD, 0xFEFE, C),
        (0xFEFF, 0xFEFF, F),
        (0xFF00, 0xFF00, C),
        (0xFFBF, 0xFFC1, C),
        (0xFFC8, 0xFFC9, C),
        (0xFFD0, 0xFFD1, C),
        (0xFFD8, 0xFFD9, C),
        (0xFFDD, 0xFFDF, C),
        (0xFFE7, 0xFFE7, C),
        (0xFFEF, 0xFFF8, C),
        (0xFFF9, 0xFFFB, F),
        (0xFFFE, 0xFFFF, C),
    ),
    # 0x10000...0x1FFFF
    (
        (0x1000C, 0x1000C, C),
        (0x10027, 0x10027, C),
        (0x1003B, 0x1003B, C),
        (0x1003E, 0x1003E, C),
        (0x1004E, 0x1004F, C),
        (0x1005E, 0x1007F, C),
        (0x100FB, 0x100FF, C),
        (0x10103, 0x10106, C),
        (0x10134, 0x10136, C),
        (0x1018F, 0x1018F, C),
        (0x1019D, 0x1019F, C),
        (0x101A1, 0x101CF, C),
        (0x101FE, 0x1027F, C),
        (0x1029D, 0x1029F, C),
        (0x102D1, 0x102DF, C),
        (0x102FC, 0x102FF, C),
        (0x10324, 0x1032C, C),
        (0x1034B, 0x1034F, C),
        (0x1037B, 0x1037F, C),
        (0x1039E, 0x1039E, C),
        (0x103C4, 0x103C7, C),
        (0x103D6, 0x103FF, C),
        (0x1049E, 0x1049F, C),
        (0x104AA, 0x104AF, C),
        (0x104D4, 0x104D7, C),
        (0x104FC, 0x104FF, C),
        (0x10528, 0x1052F, C),
        (0x10564, 0x1056E, C),
        (0x1057B, 0x1057B, C),
        (0x1058B, 0x1058B, C),
        (0x10593, 0x10593, C),
        (0x10596, 0x10596, C),
        (0x105A2, 0x105A2, C),
        (0x105B2, 0x105B2, C),
        (0x105BA, 0x105BA, C),
        (0x105BD, 0x105BF, C),
        (0x105F4, 0x105FF, C),
        (0x10737, 0x1073F, C),
        (0x10756, 0x1075F, C),
        (0x10768, 0x1077F, C),
        (0x10786, 0x10786, C),
        (0x107B1, 0x107B1, C),
        (0x107BB, 0x107FF, C),
        (0x10806, 0x10807, C),
        (0x10809, 0x10809, C),
        (0x10836, 0x10836, C),
        (0x10839, 0x1083B, C),
        (0x1083D, 0x1083E, C),
        (0x10856, 0x10856, C),
        (0x1089F, 0x108A6, C),
        (0x108B0, 0x108DF, C),
        (0x108F3, 0x108F3, C),
        (0x108F6, 0x108FA, C),
        (0x1091C, 0x1091E, C),
        (0x1093A, 0x1093E, C),
        (0x10940, 0x1097F, C),
        (0x109B8, 0x109BB, C),
        (0x109D0, 0x109D1, C),
        (0x10A04, 0x10A04, C),
        (0x10A07, 0x10A0B, C),
        (0x10A14, 0x10A14, C),
        (0x10A18, 0x10A18, C),
        (0x10A36, 0x10A37, C),
        (0x10A3B, 0x10A3E, C),
        (0x10A49, 0x10A4F, C),
        (0x10A59, 0x10A5F, C),
        (0x10AA0, 0x10ABF, C),
        (0x10AE7, 0x10AEA, C),
        (0x10AF7, 0x10AFF, C),
        (0x10B36, 0x10B38, C),
        (0x10B56, 0x10B57, C),
        (0x10B73, 0x10B77, C),
        (0x10B92, 0x10B98, C),
        (0x10B9D, 0x10BA8, C),
        (0x10BB0, 0x10BFF, C),
        (0x10C49, 0x10C7F, C),
        (0x10CB3, 0x10CBF, C),
        (0x10CF3, 0x10CF9, C),
        (0x10D28, 0x10D2F, C),
        (0x10D3A, 0x10D3F, C),
        (0x10D66, 0x10D68, C),
        (0x10D86, 0x10D8D, C),
        (0x10D90, 0x10E5F, C),
        (0x10E7F, 0x10E7F, C),
        (0x10EAA, 0x10EAA, C),
        (0x10EAE, 0x10EAF, C),
        (0x10EB2, 0x10EC1, C),
        (0x10EC5, 0x10EFB, C),
        (0x10F28, 0x10F2F, C),
        (0x10F5A, 0x10F6F, C),
        (0x10F8A, 0x10FAF, C),
        (0x10FCC, 0x10FDF, C),
        (0x10FF7, 0x10FFF, C),
        (0x1104E, 0x11051, C),
        (0x11076, 0x1107E, C),
        (0x110BD, 0x110BD, F),
        (0x110C3, 0x110CC, C),
        (0x110CD, 0x110CD, F),
        (0x110CE, 0x110CF, C),
        (0x110E9, 0x110EF, C),
        (0x110FA, 0x110FF, C),
        (0x11135, 0x11135, C),
        (0x11148, 0x1114F, C),
        (0x11177, 0x1117F, C),
        (0x111E0, 0x111E0, C),
        (0x111F5, 0x111FF, C),
        (0x11212, 0x11212, C),
        (0x11242, 0x1127F, C),
        (0x11287, 0x11287, C),
        (0x11289, 0x11289, C),
        (0x1128E, 0x1128E, C),
        (0x1129E, 0x1129E, C),
        (0x112AA, 0x112AF, C),
        (0x112EB, 0x112EF, C),
        (0x112FA, 0x112FF, C),
        (0x11304, 0x11304, C),
        (0x1130D, 0x1130E, C),
        (0x11311, 0x11312, C),
        (0x11329, 0x11329, C),
        (0x11331, 0x11331, C),
        (0x11334, 0x11334, C),
        (0x1133A, 0x1133A, C),
        (0x11345, 0x11346, C),
        (0x11349, 0x1134A, C),
        (0x1134E, 0x1134F, C),
        (0x11351, 0x11356, C),
        (0x11358, 0x1135C, C),
        (0x11364, 0x11365, C),
        (0x1136D, 0x1136F, C),
        (0x11375, 0x1137F, C),
        (0x1138A, 0x1138A, C),
        (0x1138C, 0x1138D, C),
        (0x1138F, 0x1138F, C),
        (0x113B6, 0x113B6, C),
        (0x113C1, 0x113C1, C),
        (0x113C3, 0x113C4, C),
        (0x113C6, 0x113C6, C),
        (0x113CB, 0x113CB, C),
        (0x113D6, 0x113D6, C),
        (0x113D9, 0x113E0, C),
        (0x113E3, 0x113FF, C),
        (0x1145C, 0x1145C, C),
        (0x11462, 0x1147F, C),
        (0x114C8, 0x114CF, C),
        (0x114DA, 0x1157F, C),
        (0x115B6, 0x115B7, C),
        (0x115DE, 0x115FF, C),
        (0x11645, 0x1164F, C),
        (0x1165A, 0x1165F, C),
        (0x1166D, 0x1167F, C),
        (0x116BA, 0x116BF, C),
        (0x116CA, 0x116CF, C),
        (0x116E4, 0x116FF, C),
        (0x1171B, 0x1171C, C),
        (0x1172C, 0x1172F, C),
        (0x11747, 0x117FF, C),
        (0x1183C, 0x1189F, C),
        (0x118F3, 0x118FE, C),
        (0x11907, 0x11908, C),
        (0x1190A, 0x1190B, C),
        (0x11914, 0x11914, C),
        (0x11917, 0x11917, C),
        (0x11936, 0x11936, C),
        (0x11939, 0x1193A, C),
        (0x11947, 0x1194F, C),
        (0x1195A, 0x1199F, C),
        (0x119A8, 0x119A9, C),
        (0x119D8, 0x119D9, C),
        (0x119E5, 0x119FF, C),
        (0x11A48, 0x11A4F, C),
        (0x11AA3, 0x11AAF, C),
        (0x11AF9, 0x11AFF, C),
        (0x11B0A, 0x11BBF, C),
        (0x11BE2, 0x11BEF, C),
        (0x11BFA, 0x11BFF, C),
        (0x11C09, 0x11C09, C),
        (0x11C37, 0x11C37, C),
        (0x11C46, 0x11C4F, C),
        (0x11C6D, 0x11C6F, C),
        (0x11C90, 0x11C91, C),
        (0x11CA8, 0x11CA8, C),
        (0x11CB7, 0x11CFF, C),
        (0x11D07, 0x11D07, C),
        (0x11D0A, 0x11D0A, C),
        (0x11D37, 0x11D39, C),
        (0x11D3B, 0x11D3B, C),
        (0x11D3E, 0x11D3E, C),
        (0x11D48, 0x11D4F, C),
        (0x11D5A, 0x11D5F, C),
        (0x11D66, 0x11D66, C),
        (0x11D69, 0x11D69, C),
        (0x11D8F, 0x11D8F, C),
        (0x11D92, 0x11D92, C),
        (0x11D99, 0x11D9F, C),
        (0x11DAA, 0x11EDF, C),
        (0x11EF9, 0x11EFF, C),
        (0x11F11, 0x11F11, C),
        (0x11F3B, 0x11F3D, C),
        (0x11F5B, 0x11FAF, C),
        (0x11FB1, 0x11FBF, C),
        (0x11FF2, 0x11FFE, C),
        (0x1239A, 0x123FF, C),
        (0x1246F, 0x1246F, C),
        (0x12475, 0x1247F, C),
        (0x12544, 0x12F8F, C),
        (0x12FF3, 0x12FFF, C),
        (0x13430, 0x1343F, F),
        (0x13456, 0x1345F, C),
        (0x143FB, 0x143FF, C),
        (0x14647, 0x160FF, C),
        (0x1613A, 0x167FF, C),
        (0x16A39, 0x16A3F, C),
        (0x16A5F, 0x16A5F, C),
        (0x16A6A, 0x16A6D, C),
        (0x16ABF, 0x16ABF, C),
        (0x16ACA, 0x16ACF, C),
        (0x16AEE, 0x16AEF, C),
        (0x16AF6, 0x16AFF, C),
        (0x16B46, 0x16B4F, C),
        (0x16B5A, 0x16B5A, C),
        (0x16B62, 0x16B62, C),
        (0x16B78, 0x16B7C, C),
        (0x16B90, 0x16D3F, C),
        (0x16D7A, 0x16E3F, C),
        (0x16E9B, 0x16EFF, C),
        (0x16F4B, 0x16F4E, C),
        (0x16F88, 0x16F8E, C),
        (0x16FA0, 0x16FDF, C),
        (0x16FE5, 0x16FEF, C),
        (0x16FF2, 0x16FFF, C),
        (0x187F8, 0x187FF, C),
        (0x18CD6, 0x18CFE, C),
        (0x18D09, 0x1AFEF, C),
        (0x1AFF4, 0x1AFF4, C),
        (0x1AFFC, 0x1AFFC, C),
        (0x1AFFF, 0x1AFFF, C),
        (0x1B123, 0x1B131, C),
        (0x1B133, 0x1B14F, C),
        (0x1B153, 0x1B154, C),
        (0x1B156, 0x1B163, C),
        (0x1B168, 0x1B16F, C),
        (0x1B2FC, 0x1BBFF, C),
        (0x1BC6B, 0x1BC6F, C),
        (0x1BC7D, 0x1BC7F, C),
        (0x1BC89, 0x1BC8F, C),
        (0x1BC9A, 0x1BC9B, C),
        (0x1BCA0, 0x1BCA3, F),
        (0x1BCA4, 0x1CBFF, C),
        (0x1CCFA, 0x1CCFF, C),
        (0x1CEB4, 0x1CEFF, C),
        (0x1CF2E, 0x1CF2F, C),
        (0x1CF47, 0x1CF4F, C),
        (0x1CFC4, 0x1CFFF, C),
        (0x1D0F6, 0x1D0FF, C),
        (0x1D127, 0x1D128, C),
        (0x1D173, 0x1D17A, F),
        (0x1D1EB, 0x1D1FF, C),
        (0x1D246, 0x1D2BF, C),
        (0x1D2D4, 0x1D2DF, C),
        (0x1D2F4, 0x1D2FF, C),
        (0x1D357, 0x1D35F, C),
        (0x1D379, 0x1D3FF, C),
        (0x1D455, 0x1D455, C),
        (0x1D49D, 0x1D49D, C),
        (0x1D4A0, 0x1D4A1, C),
        (0x1D4A3, 0x1D4A4, C),
        (0x1D4A7, 0x1D4A8, C),
        (0x1D4AD, 0x1D4AD, C),
        (0x1D4BA, 0x1D4BA, C),
        (0x1D4BC, 0x1D4BC, C),
        (0x1D4C4, 0x1D4C4, C),
        (0x1D506, 0x1D506, C),
        (0x1D50B, 0x1D50C, C),
        (0x1D515, 0x1D515, C),
        (0x1D51D, 0x1D51D, C),
        (0x1D53A, 0x1D53A, C),
        (0x1D53F, 0x1D53F, C),
        (0x1D545, 0x1D545, C),
        (0x1D547, 0x1D549, C),
        (0x1D551, 0x1D551, C),
        (0x1D6A6, 0x1D6A7, C),
        (0x1D7CC, 0x1D7CD, C),
        (0x1DA8C, 0x1DA9A, C),
        (0x1DAA0, 0x1DAA0, C),
        (0x1DAB0, 0x1DEFF, C),
        (0x1DF1F, 0x1DF24, C),
        (0x1DF2B, 0x1DFFF, C),
        (0x1E007, 0x1E007, C),
        (0x1E019, 0x1E01A, C),
        (0x1E022, 0x1E022, C),
        (0x1E025, 0x1E025, C),
        (0x1E02B, 0x1E02F, C),
        (0x1E06E, 0x1E08E, C),
        (0x1E090, 0x1E0FF, C),
        (0x1E12D, 0x1E12F, C),
        (0x1E13E, 0x1E13F, C),
        (0x1E14A, 0x1E14D, C),
        (0x1E150, 0x1E28F, C),
        (0x1E2AF, 0x1E2BF, C),
        (0x1E2FA, 0x1E2FE, C),
        (0x1E300, 0x1E4CF, C),
        (0x1E4FA, 0x1E5CF, C),
        (0x1E5FB, 0x1E5FE, C),
        (0x1E600, 0x1E7DF, C),
        (0x1E7E7, 0x1E7E7, C),
        (0x1E7EC, 0x1E7EC, C),
        (0x1E7EF, 0x1E7EF, C),
        (0x1E7FF, 0x1E7FF, C),
        (0x1E8C5, 0x1E8C6, C),
        (0x1E8D7, 0x1E8FF, C),
        (0x1E94C, 0x1E94F, C),
        (0x1E95A, 0x1E95D, C),
        (0x1E960, 0x1EC70, C),
        (0x1ECB5, 0x1ED00, C),
        (0x1ED3E, 0x1EDFF, C),
        (0x1EE04, 0x1EE04, C),
        (0x1EE20, 0x1EE20, C),
        (0x1EE23, 0x1EE23, C),
        (0x1EE25, 0x1EE26, C),
        (0x1EE28, 0x1EE28, C),
        (0x1EE33, 0x1EE33, C),
        (0x1EE38, 0x1EE38, C),
        (0x1EE3A, 0x1EE3A, C),
        (0x1EE3C, 0x1EE41, C),
        (0x1EE43, 0x1EE46, C),
        (0x1EE48, 0x1EE48, C),
        (0x1EE4A, 0x1EE4A, C),
        (0x1EE4C, 0x1EE4C, C),
        (0x1EE50, 0x1EE50, C),
        (0x1EE53, 0x1EE53, C),
        (0x1EE55, 0x1EE56, C),
        (0x1EE58, 0x1EE58, C),
        (0x1EE5A, 0x1EE5A, C),
        (0x1EE5C, 0x1EE5C, C),
        (0x1EE5E, 0x1EE5E, C),
        (0x1EE60, 0x1EE60, C),
        (0x1EE63, 0x1EE63, C),
        (0x1EE65, 0x1EE66, C),
        (0x1EE6B, 0x1EE6B, C),
        (0x1EE73, 0x1EE73, C),
        (0x1EE78, 0x1EE78, C),
        (0x1EE7D, 0x1EE7D, C),
        (0x1EE7F, 0x1EE7F, C),
        (0x1EE8A, 0x1EE8A, C),
        (0x1EE9C, 0x1EEA0, C),
        (0x1EEA4, 0x1EEA4, C),
        (0x1EEAA, 0x1EEAA, C),
        (0x1EEBC, 0x1EEEF, C),
        (0x1EEF2, 0x1EFFF, C),
        (0x1F02C, 0x1F02F, C),
        (0x1F094, 0x1F09F, C),
        (0x1F0AF, 0x1F0B0, C),
        (0x1F0C0, 0x1F0C0, C),
        (0x1F0D0, 0x1F0D0, C),
        (0x1F0F6, 0x1F0FF, C),
        (0x1F1AE, 0x1F1E5, C),
        (0x1F203, 0x1F20F, C),
        (0x1F23C, 0x1F23F, C),
        (0x1F249, 0x1F24F, C),
        (0x1F252, 0x1F25F, C),
        (0x1F266, 0x1F2FF, C),
        (0x1F6D8, 0x1F6DB, C),
        (0x1F6ED, 0x1F6EF, C),
        (0x1F6FD, 0x1F6FF, C),
        (0x1F777, 0x1F77A, C),
        (0x1F7DA, 0x1F7DF, C),
        (0x1F7EC, 0x1F7EF, C),
        (0x1F7F1, 0x1F7FF, C),
        (0x1F80C, 0x1F80F, C),
        (0x1F848, 0x1F84F, C),
        (0x1F85A, 0x1F85F, C),
        (0x1F888, 0x1F88F, C),
        (0x1F8AE, 0x1F8AF, C),
        (0x1F8BC, 0x1F8BF, C),
        (0x1F8C2, 0x1F8FF, C),
        (0x1FA54, 0x1FA5F, C),
        (0x1FA6E, 0x1FA6F, C),
        (0x1FA7D, 0x1FA7F, C),
        (0x1FA8A, 0x1FA8E, C),
        (0x1FAC7, 0x1FACD, C),
        (0x1FADD, 0x1FADE, C),
        (0x1FAEA, 0x1FAEF, C),
        (0x1FAF9, 0x1FAFF, C),
        (0x1FB93, 0x1FB93, C),
        (0x1FBFA, 0x1FFFF, C),
    ),
    # 0x20000...0x3FFFF
    (
        (0x2A6E0, 0x2A6FF, C),
        (0x2B73A, 0x2B73F, C),
        (0x2B81E, 0x2B81F, C),
        (0x2CEA2, 0x2CEAF, C),
        (0x2EBE1, 0x2EBEF, C),
        (0x2EE5E, 0x2F7FF, C),
        (0x2FA1E, 0x2FFFF, C),
        (0x3134B, 0x3134F, C),
        (0x323B0, 0x3FFFF, C),
    ),
    # 0x40000...0x7FFFF
    (
        (0x40000, 0x7FFFF, C),
    ),
    # 0x80000...0xFFFFF
    (
        (0x80000, 0xE0000, C),
        (0xE0001, 0xE0001, F),
        (0xE0002, 0xE001F, C),
        (0xE0020, 0xE007F, F),
        (0xE0080, 0xE00FF, C),
        (0xE01F0, 0xFFFFF, C),
    ),
    # 0x100000...0x1FFFFF
    (
        (0x100000, 0x10FFFF, C),
    ),
)
