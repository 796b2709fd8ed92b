from bazelgen import Config
from bazelgen.details.project import AbstractProject
from bazelgen.generators.bazel import BazelGenerator


def generate_main(project: AbstractProject, config: Config):
    generator = BazelGenerator(config, project)
    generator()
