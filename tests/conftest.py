"""Shared test fixtures for typekeep."""

import pytest

from typekeep.config.models import TargetConfig, TypekeepConfig


# Shape of a declaration artifact produced by a networked codegen run.
REAL_DTS = '''\
/* eslint-disable */
/**
 * Generated `api` utility.
 */
import type { ApiFromModules, FilterApi, FunctionReference } from "convex/server";
import type * as messages from "../messages.js";

declare const fullApi: ApiFromModules<{
  messages: typeof messages,
}>;
export declare const api: FilterApi<typeof fullApi, FunctionReference<any, "public">>;
export declare const internal: FilterApi<typeof fullApi, FunctionReference<any, "internal">>;
export declare const components: {
  rateLimiter: {
    lib: {
      checkRateLimit: FunctionReference<"query", "internal", { name: string }, boolean>;
    };
  };
};
'''

# The same artifact as emitted by an offline run.
STUB_DTS = '''\
/* eslint-disable */
import type { ApiFromModules, FilterApi, FunctionReference, AnyComponents } from "convex/server";

declare const fullApi: ApiFromModules<{}>;
export declare const api: FilterApi<typeof fullApi, FunctionReference<any, "public">>;
export declare const internal: FilterApi<typeof fullApi, FunctionReference<any, "internal">>;
export declare const components: AnyComponents;
'''

# TypeScript (non-declaration) flavour of the offline artifact.
STUB_TS = '''\
/* eslint-disable */
import type { ApiFromModules, FilterApi, FunctionReference, AnyComponents } from "convex/server";
import { anyApi, componentsGeneric } from "convex/server";

const fullApi: ApiFromModules<{}> = anyApi as any;

export const api: FilterApi<typeof fullApi, FunctionReference<any, "public">> = anyApi as any;

export const internal: FilterApi<typeof fullApi, FunctionReference<any, "internal">> = anyApi as any;

export const components: AnyComponents = componentsGeneric();
'''

REAL_TS = '''\
import { anyApi, componentsGeneric } from "convex/server";

export const api = anyApi as any;
export const internal = anyApi as any;
export const components: {
  rateLimiter: { lib: { check: FunctionReference<"query", "internal", {}, boolean> } };
} = componentsGeneric();
'''


@pytest.fixture
def real_dts():
    return REAL_DTS


@pytest.fixture
def stub_dts():
    return STUB_DTS


@pytest.fixture
def stub_ts():
    return STUB_TS


@pytest.fixture
def real_ts():
    return REAL_TS


@pytest.fixture
def sample_config():
    return TypekeepConfig()


@pytest.fixture
def multi_target_config():
    """Two preserved bindings, each with its own placeholder names."""
    return TypekeepConfig(
        targets={
            "components": TargetConfig(sentinels=["AnyComponents"]),
            "schema": TargetConfig(sentinels=["AnySchema", "GenericSchema"]),
        }
    )


@pytest.fixture
def generated_dir(tmp_path):
    """A temp _generated directory for artifact reading tests."""
    d = tmp_path / "convex" / "_generated"
    d.mkdir(parents=True)
    return d
