class LegacyRandom:
    '''
    Replay of the legacy calculator's "random" numbers.

    The legacy program never seeded its generator, so its output was always
    this same sequence. Iterating yields it forever, wrapping around after
    the last entry.
    '''

    SEQUENCE = (
        1804289383,
        846930886,
        1681692777,
        1714636915,
        1957747793,
        424238335,
        719885386,
        1649760492,
        596516649,
        1189641421,
        1025202362,
        1350490027,
        783368690,
        1102520059,
        2044897763,
        1967513926,
        1365180540,
        1540383426,
        304089172,
        1303455736,
        35005211,
        521595368,
    )

    def __init__(self):
        self.cursor = 0

    def __iter__(self):
        return self

    def __next__(self):
        value = type(self).SEQUENCE[self.cursor]
        self.cursor = (self.cursor + 1) % len(type(self).SEQUENCE)
        return value
