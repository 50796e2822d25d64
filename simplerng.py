import math

from models import SeedInput, SingleValue, Timestamp, TwoValues, seed_input_from_args, seed_to_int

C_32_BIT = 2**32
F_32_BIT = float(C_32_BIT)

DEFAULT_M_W = 521288629
DEFAULT_M_Z = 362436069


class SimpleRNG:
    # Реализован как MWC генератор Марсальи (два 32-битных слова состояния)
    m_w: int
    m_z: int
    def __init__(self, m_w=DEFAULT_M_W, m_z=DEFAULT_M_Z, logging_on=False):
        self.m_w = m_w % C_32_BIT
        self.m_z = m_z % C_32_BIT
        self.logging_on = logging_on

    def log(self, message):
        if self.logging_on:
            print(f"{self.m_w}:{self.m_z}|{message}")

    def get_state(self):
        return self.m_w, self.m_z

    # ================ #
    #    СИДИРОВАНИЕ   #
    # ================ #

    def set_seed(self, *args):
        self.seed(seed_input_from_args(*args))

    def seed(self, seed_input: SeedInput):
        if isinstance(seed_input, TwoValues):
            m_w, m_z = seed_to_int(seed_input.w), seed_to_int(seed_input.z)
        elif isinstance(seed_input, SingleValue):
            m_w, m_z = self.m_w, seed_to_int(seed_input.z)
        elif isinstance(seed_input, Timestamp):
            x = seed_input.to_micros()
            m_w, m_z = x >> 16, x
        else:
            raise TypeError(f"Unsupported seed input {seed_input!r}")

        self.m_w = m_w % C_32_BIT
        self.m_z = m_z % C_32_BIT
        self.log(f"reseeded from {seed_input}")

    # ================ #
    #  РАВНОМЕРНОЕ     #
    # ================ #

    def _next_uint32(self):
        # See http://www.bobwheeler.com/statistics/Password/MarsagliaPost.txt
        self.m_z = 36969 * (self.m_z & 0xFFFF) + (self.m_z >> 16)
        self.m_w = 18000 * (self.m_w & 0xFFFF) + (self.m_w >> 16)
        return ((self.m_z << 16) + (self.m_w & 0xFFFF)) % C_32_BIT

    def uniform(self, lower=0.0, upper=1.0):
        """Sample from (lower, upper].

        Only the top raw draw 0xFFFFFFFF maps onto upper itself; the lower end
        point is never returned.
        """
        if not upper > lower:
            raise ValueError("Upper bound must be greater than lower bound")
        return ((self._next_uint32() + 1) * (upper - lower) / F_32_BIT) + lower

    # ================ #
    #  ПРЕОБРАЗОВАНИЯ  #
    # ================ #

    def normal(self, mean=0.0, sd=1.0):
        if not sd > 0:
            raise ValueError("Standard deviation must be strictly positive")
        # Box-Muller, берём только синусную ветку
        u1 = self.uniform()
        u2 = self.uniform()
        return mean + sd * math.sqrt(-2.0 * math.log(u1)) * math.sin(2.0 * math.pi * u2)

    def exponential(self, mean=1.0):
        if not mean > 0:
            raise ValueError("Mean must be strictly positive")
        # uniform() может вернуть ровно 1.0, abs убирает -0.0
        return mean * abs(math.log(self.uniform()))

    def triangular(self, lower, mode, upper):
        if not lower < upper:
            raise ValueError("Upper bound must be greater than lower bound")
        if mode < lower or mode > upper:
            raise ValueError("Mode must lie between the upper and lower limits")

        f_c = (mode - lower) / (upper - lower)
        p = self.uniform()
        if p < f_c:
            return lower + math.sqrt(p * (upper - lower) * (mode - lower))
        return upper - math.sqrt((1 - p) * (upper - lower) * (upper - mode))

    def gamma(self, shape, scale=1.0):
        """Gamma sample.

        Based on "A Simple Method for Generating Gamma Variables" by George
        Marsaglia and Wai Wan Tsang, ACM Transactions on Mathematical Software,
        Vol 26, No 3, September 2000, pages 363-372.
        """
        if not shape > 0:
            raise ValueError("Shape must be strictly positive")
        if not scale > 0:
            raise ValueError("Scale must be strictly positive")

        if shape < 1:
            # u > 0 всегда, степень определена
            base = self.gamma(shape + 1.0, 1.0) * self.uniform() ** (1.0 / shape)
            return scale * base

        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)
        while True:
            z = self.normal()
            if z <= -1.0 / c:
                continue
            v = (1.0 + c * z) ** 3
            u = self.uniform()
            if u < 1.0 - 0.0331 * z**4:
                break
            if math.log(u) < 0.5 * z**2 + d * (1.0 - v + math.log(v)):
                break
        return scale * d * v

    def chi_square(self, df):
        return self.gamma(0.5 * df, 2.0)

    def inverse_gamma(self, shape, scale):
        if not scale > 0:
            raise ValueError("Scale must be strictly positive")
        return 1.0 / self.gamma(shape, 1.0 / scale)

    def beta(self, a, b):
        if not (a > 0 and b > 0):
            raise ValueError("Parameters must be strictly positive")
        u = self.gamma(a, 1.0)
        v = self.gamma(b, 1.0)
        return u / (u + v)

    def dirichlet(self, *params):
        if not all(p > 0 for p in params):
            raise ValueError("Parameters must be strictly positive")
        if len(params) == 0:
            return []
        sample = [self.gamma(p, 1.0) for p in params]
        total = sum(sample)
        return [g / total for g in sample]

    def weibull(self, shape, scale):
        if not (shape > 0 and scale > 0):
            raise ValueError("Shape and scale must be positive")
        return scale * abs(math.log(self.uniform())) ** (1.0 / shape)

    def cauchy(self, median, scale):
        if not scale > 0:
            raise ValueError("Scale must be positive")
        return median + scale * math.tan(math.pi * (self.uniform() - 0.5))

    def student_t(self, df):
        if not df > 0:
            raise ValueError("Degrees of freedom must be strictly positive")
        return self.normal() / math.sqrt(self.chi_square(df) / df)

    def laplace(self, mean, scale):
        if not scale > 0:
            raise ValueError("Scale must be positive")
        u1 = self.uniform(-0.5, 0.5)
        u2 = self.uniform()
        sign = math.copysign(1.0, u1)
        if u2 == 1.0:
            return mean - sign * math.inf
        return mean + sign * scale * math.log(1 - u2)

    def log_normal(self, mu, sigma):
        return math.exp(self.normal(mu, sigma))
