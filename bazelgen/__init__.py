from bazelgen.config import Config
