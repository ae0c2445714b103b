"""
calastro.engines.tables
-----------------------
Coefficient tables for the solar longitude, new-moon and lunar position
series (Bretagnon & Simon 1986; Meeus, Astronomical Algorithms, ch. 47 and 49).
"""

from __future__ import annotations

from .series import PeriodicTable

# (amplitude, phase deg, rate deg per Julian century)
SOLAR_LONGITUDE = PeriodicTable(
    "solar_longitude",
    ("coefficient", "addend", "multiplier"),
    (
        (403406, 270.54861, 0.9287892),
        (195207, 340.19128, 35999.1376958),
        (119433, 63.91854, 35999.4089666),
        (112392, 331.26220, 35998.7287385),
        (3891, 317.843, 71998.20261),
        (2819, 86.631, 71998.4403),
        (1721, 240.052, 36000.35726),
        (660, 310.26, 71997.4812),
        (350, 247.23, 32964.4678),
        (334, 260.87, -19.4410),
        (314, 297.82, 445267.1117),
        (268, 343.14, 45036.8840),
        (242, 166.79, 3.1008),
        (234, 81.53, 22518.4434),
        (158, 3.50, -19.9739),
        (132, 132.75, 65928.9345),
        (129, 182.95, 9038.0293),
        (114, 162.03, 3034.7684),
        (99, 29.8, 33718.148),
        (93, 266.4, 3034.448),
        (86, 249.2, -2280.773),
        (78, 157.6, 29929.992),
        (72, 257.8, 31556.493),
        (68, 185.1, 149.588),
        (64, 69.9, 9037.750),
        (46, 8.0, 107997.405),
        (38, 197.1, -4444.176),
        (37, 250.4, 151.771),
        (32, 65.3, 67555.316),
        (29, 162.7, 31556.080),
        (28, 341.5, -4561.540),
        (27, 291.6, 107996.706),
        (27, 98.5, 1221.655),
        (25, 146.7, 62894.167),
        (24, 110.0, 31437.369),
        (21, 5.2, 14578.298),
        (21, 342.6, -31931.757),
        (20, 230.9, 34777.243),
        (18, 256.1, 1221.999),
        (17, 45.3, 62894.511),
        (14, 242.9, -4442.039),
        (13, 115.2, 107997.909),
        (13, 151.8, 119.066),
        (13, 285.3, 16859.071),
        (12, 53.3, -4.578),
        (10, 126.6, 26895.292),
        (10, 205.7, -39.127),
        (10, 85.9, 12297.536),
        (10, 146.1, 90073.778),
    ),
)

# (sine amplitude, E exponent, M, M', F)
NEW_MOON_TERMS = PeriodicTable(
    "new_moon",
    ("sine_coeff", "e_factor", "solar_coeff", "lunar_coeff", "moon_coeff"),
    (
        (-0.40720, 0, 0, 1, 0),
        (0.17241, 1, 1, 0, 0),
        (0.01608, 0, 0, 2, 0),
        (0.01039, 0, 0, 0, 2),
        (0.00739, 1, -1, 1, 0),
        (-0.00514, 1, 1, 1, 0),
        (0.00208, 2, 2, 0, 0),
        (-0.00111, 0, 0, 1, -2),
        (-0.00057, 0, 0, 1, 2),
        (0.00056, 1, 1, 2, 0),
        (-0.00042, 0, 0, 3, 0),
        (0.00042, 1, 1, 0, 2),
        (0.00038, 1, 1, 0, -2),
        (-0.00024, 1, -1, 2, 0),
        (-0.00007, 0, 2, 1, 0),
        (0.00004, 0, 0, 2, -2),
        (0.00004, 0, 3, 0, 0),
        (0.00003, 0, 1, 1, -2),
        (0.00003, 0, 0, 2, 2),
        (-0.00003, 0, 1, 1, 2),
        (0.00003, 0, -1, 1, 2),
        (-0.00002, 0, -1, 1, -2),
        (-0.00002, 0, 1, 3, 0),
        (0.00002, 0, 0, 4, 0),
    ),
)

# Planetary arguments: (constant deg, rate deg per lunation, amplitude day)
NEW_MOON_ADDITIONAL = PeriodicTable(
    "new_moon_additional",
    ("add_const", "add_coeff", "add_factor"),
    (
        (251.88, 0.016321, 0.000165),
        (251.83, 26.651886, 0.000164),
        (349.42, 36.412478, 0.000126),
        (84.66, 18.206239, 0.000110),
        (141.74, 53.303771, 0.000062),
        (207.14, 2.453732, 0.000060),
        (154.84, 7.306860, 0.000056),
        (34.52, 27.261239, 0.000047),
        (207.19, 0.121824, 0.000042),
        (291.34, 1.844379, 0.000040),
        (161.72, 24.198154, 0.000037),
        (239.56, 25.513099, 0.000035),
        (331.55, 3.592518, 0.000023),
    ),
)

# (amplitude in 1e-6 deg, D, M, M', F)
LUNAR_LONGITUDE = PeriodicTable(
    "lunar_longitude",
    ("v", "w", "x", "y", "z"),
    (
        (6288774, 0, 0, 1, 0),
        (1274027, 2, 0, -1, 0),
        (658314, 2, 0, 0, 0),
        (213618, 0, 0, 2, 0),
        (-185116, 0, 1, 0, 0),
        (-114332, 0, 0, 0, 2),
        (58793, 2, 0, -2, 0),
        (57066, 2, -1, -1, 0),
        (53322, 2, 0, 1, 0),
        (45758, 2, -1, 0, 0),
        (-40923, 0, 1, -1, 0),
        (-34720, 1, 0, 0, 0),
        (-30383, 0, 1, 1, 0),
        (15327, 2, 0, 0, -2),
        (-12528, 0, 0, 1, 2),
        (10980, 0, 0, 1, -2),
        (10675, 4, 0, -1, 0),
        (10034, 0, 0, 3, 0),
        (8548, 4, 0, -2, 0),
        (-7888, 2, 1, -1, 0),
        (-6766, 2, 1, 0, 0),
        (-5163, 1, 0, -1, 0),
        (4987, 1, 1, 0, 0),
        (4036, 2, -1, 1, 0),
        (3994, 2, 0, 2, 0),
        (3861, 4, 0, 0, 0),
        (3665, 2, 0, -3, 0),
        (-2689, 0, 1, -2, 0),
        (-2602, 2, 0, -1, 2),
        (2390, 2, -1, -2, 0),
        (-2348, 1, 0, 1, 0),
        (2236, 2, -2, 0, 0),
        (-2120, 0, 1, 2, 0),
        (-2069, 0, 2, 0, 0),
        (2048, 2, -2, -1, 0),
        (-1773, 2, 0, 1, -2),
        (-1595, 2, 0, 0, 2),
        (1215, 4, -1, -1, 0),
        (-1110, 0, 0, 2, 2),
        (-892, 3, 0, -1, 0),
        (-810, 2, 1, 1, 0),
        (759, 4, -1, -2, 0),
        (-713, 0, 2, -1, 0),
        (-700, 2, 2, -1, 0),
        (691, 2, 1, -2, 0),
        (596, 2, -1, 0, -2),
        (549, 4, 0, 1, 0),
        (537, 0, 0, 4, 0),
        (520, 4, -1, 0, 0),
        (-487, 1, 0, -2, 0),
        (-399, 2, 1, 0, -2),
        (-381, 0, 0, 2, -2),
        (351, 1, 1, 1, 0),
        (-340, 3, 0, -2, 0),
        (330, 4, 0, -3, 0),
        (327, 2, -1, 2, 0),
        (-323, 0, 2, 1, 0),
        (299, 1, 1, -1, 0),
        (294, 2, 0, 3, 0),
    ),
)

# (amplitude in 1e-6 deg, D, M, M', F)
LUNAR_LATITUDE = PeriodicTable(
    "lunar_latitude",
    ("v", "w", "x", "y", "z"),
    (
        (5128122, 0, 0, 0, 1),
        (280602, 0, 0, 1, 1),
        (277693, 0, 0, 1, -1),
        (173237, 2, 0, 0, -1),
        (55413, 2, 0, -1, 1),
        (46271, 2, 0, -1, -1),
        (32573, 2, 0, 0, 1),
        (17198, 0, 0, 2, 1),
        (9266, 2, 0, 1, -1),
        (8822, 0, 0, 2, -1),
        (8216, 2, -1, 0, -1),
        (4324, 2, 0, -2, -1),
        (4200, 2, 0, 1, 1),
        (-3359, 2, 1, 0, -1),
        (2463, 2, -1, -1, 1),
        (2211, 2, -1, 0, 1),
        (2065, 2, -1, -1, -1),
        (-1870, 0, 1, -1, -1),
        (1828, 4, 0, -1, -1),
        (-1794, 0, 1, 0, 1),
        (-1749, 0, 0, 0, 3),
        (-1565, 0, 1, -1, 1),
        (-1491, 1, 0, 0, 1),
        (-1475, 0, 1, 1, 1),
        (-1410, 0, 1, 1, -1),
        (-1344, 0, 1, 0, -1),
        (-1335, 1, 0, 0, -1),
        (1107, 0, 0, 3, 1),
        (1021, 4, 0, 0, -1),
        (833, 4, 0, -1, 1),
        (777, 0, 0, 1, -3),
        (671, 4, 0, -2, 1),
        (607, 2, 0, 0, -3),
        (596, 2, 0, 2, -1),
        (491, 2, -1, 1, -1),
        (-451, 2, 0, -2, 1),
        (439, 0, 0, 3, -1),
        (422, 2, 0, 2, 1),
        (421, 2, 0, -3, -1),
        (-366, 2, 1, -1, 1),
        (-351, 2, 1, 0, 1),
        (331, 4, 0, 0, 1),
        (315, 2, -1, 1, 1),
        (302, 2, -2, 0, -1),
        (-283, 0, 0, 1, 3),
        (-229, 2, 1, 1, -1),
        (223, 1, 1, 0, -1),
        (223, 1, 1, 0, 1),
        (-220, 0, 1, -2, -1),
        (-220, 2, 1, -1, -1),
        (-185, 1, 0, 1, 1),
        (181, 2, -1, -2, -1),
        (-177, 0, 1, 2, 1),
        (176, 4, 0, -2, -1),
        (166, 4, -1, -1, -1),
        (-164, 1, 0, 1, -1),
        (132, 4, 0, 1, -1),
        (-119, 1, 0, -1, -1),
        (115, 4, -1, 0, -1),
        (107, 2, -2, 0, 1),
    ),
)

# (amplitude in metres, D, M, M', F)
LUNAR_DISTANCE = PeriodicTable(
    "lunar_distance",
    ("v", "w", "x", "y", "z"),
    (
        (-20905355, 0, 0, 1, 0),
        (-3699111, 2, 0, -1, 0),
        (-2955968, 2, 0, 0, 0),
        (-569925, 0, 0, 2, 0),
        (48888, 0, 1, 0, 0),
        (-3149, 0, 0, 0, 2),
        (246158, 2, 0, -2, 0),
        (-152138, 2, -1, -1, 0),
        (-170733, 2, 0, 1, 0),
        (-204586, 2, -1, 0, 0),
        (-129620, 0, 1, -1, 0),
        (108743, 1, 0, 0, 0),
        (104755, 0, 1, 1, 0),
        (10321, 2, 0, 0, -2),
        (0, 0, 0, 1, 2),
        (79661, 0, 0, 1, -2),
        (-34782, 4, 0, -1, 0),
        (-23210, 0, 0, 3, 0),
        (-21636, 4, 0, -2, 0),
        (24208, 2, 1, -1, 0),
        (30824, 2, 1, 0, 0),
        (-8379, 1, 0, -1, 0),
        (-16675, 1, 1, 0, 0),
        (-12831, 2, -1, 1, 0),
        (-10445, 2, 0, 2, 0),
        (-11650, 4, 0, 0, 0),
        (14403, 2, 0, -3, 0),
        (-7003, 0, 1, -2, 0),
        (0, 2, 0, -1, 2),
        (10056, 2, -1, -2, 0),
        (6322, 1, 0, 1, 0),
        (-9884, 2, -2, 0, 0),
        (5751, 0, 1, 2, 0),
        (0, 0, 2, 0, 0),
        (-4950, 2, -2, -1, 0),
        (4130, 2, 0, 1, -2),
        (0, 2, 0, 0, 2),
        (-3958, 4, -1, -1, 0),
        (0, 0, 0, 2, 2),
        (3258, 3, 0, -1, 0),
        (2616, 2, 1, 1, 0),
        (-1897, 4, -1, -2, 0),
        (-2117, 0, 2, -1, 0),
        (2354, 2, 2, -1, 0),
        (0, 2, 1, -2, 0),
        (0, 2, -1, 0, -2),
        (-1423, 4, 0, 1, 0),
        (-1117, 0, 0, 4, 0),
        (-1571, 4, -1, 0, 0),
        (-1739, 1, 0, -2, 0),
        (0, 2, 1, 0, -2),
        (-4421, 0, 0, 2, -2),
        (0, 1, 1, 1, 0),
        (0, 3, 0, -2, 0),
        (0, 4, 0, -3, 0),
        (0, 2, -1, 2, 0),
        (1165, 0, 2, 1, 0),
        (0, 1, 1, -1, 0),
        (0, 2, 0, 3, 0),
        (8752, 2, 0, -1, -2),
    ),
)
