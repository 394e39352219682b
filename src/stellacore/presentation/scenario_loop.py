from stellacore.application.dtos import ScenarioReport
from stellacore.application.mappers.quest_event_mapper import (
    to_activation_event,
    to_combat_event,
    to_craft_event,
    to_gather_event,
)
from stellacore.bootstrap import SimulationContext
from stellacore.infrastructure.inmemory.catalogs import NEBULA_REGION, RELIQUARY_REGION
from stellacore.presentation.holo_renderer import HoloRenderer


PRISM = "Prisme d'Astéroïde"
PRISM_TARGET = 2
GUARDIAN = "Spectre du Vide"
GUARDIAN_DROP = "Essence Photonique"
BEACON = "Balise Stellaris"
RELAY = "Relais Stellacristal"
SURVEY_LIMIT = 2


def _finish(context: SimulationContext, renderer: HoloRenderer, *, stopped_early: bool = False) -> ScenarioReport:
    actor = context.actor
    renderer.render_inventory(actor)
    renderer.render_journal(actor)
    if not stopped_early:
        renderer.render_final_stats(actor)
        renderer.render_starmap(actor, context.quest)
    return ScenarioReport(
        completed=context.quest.completed,
        level=actor.level,
        log_entries=len(actor.log),
        stopped_early=stopped_early,
        generated_sectors=context.world.generated_region_names(),
    )


def _move(context: SimulationContext, renderer: HoloRenderer, ship, destination: str):
    report = context.world.move_ship(ship, destination)
    renderer.render_ship_movement(ship, report)
    return report


def run_scenario(context: SimulationContext, renderer: HoloRenderer) -> ScenarioReport:
    """Play the scripted relay-reactivation run, forwarding every outcome to the quest bus."""
    actor = context.actor
    world = context.world
    bus = context.event_bus

    renderer.header("Initialisation du scénario")
    renderer.console.print(f"Création du personnage : {actor.name} ({actor.archetype}) — {actor.description}")
    context.quest.announce(actor)
    renderer.render_hero(actor)

    generated = world.generated_region_names()
    actor.add_log("Le hangar orbital ouvre ses portes pour assembler une escadre modulable.")
    flagship = world.commission_ship(actor.location)
    escort = world.commission_ship(actor.location)
    renderer.render_starship(flagship)
    renderer.render_starship(escort)

    refit = world.refit_ship(flagship, "utility")
    if refit.success and refit.module is not None:
        actor.add_log(
            f"{flagship.call_sign} reçoit {refit.module.name} pour le créneau {refit.module.slot_label or refit.module.slot}."
        )
        renderer.render_starship(flagship)

    engine = world.refit_ship(escort.id, "propulsion")
    if engine.success and engine.module is not None:
        actor.add_log(f"{escort.call_sign} remplace son propulseur par {engine.module.name}.")
        renderer.render_starship(escort)

    if generated:
        recon = _move(context, renderer, escort, generated[0])
        if recon.success:
            actor.add_log(
                f"{escort.call_sign} part en reconnaissance vers {recon.destination} (trajet {recon.travel_time} cycles)."
            )
        else:
            actor.add_log(f"{escort.call_sign} ne parvient pas à engager la navigation vers le secteur assigné.")

    # Step 1: prisms
    world.travel(actor, NEBULA_REGION)
    renderer.render_region(NEBULA_REGION, world.region(NEBULA_REGION))
    while actor.resource_count(PRISM) < PRISM_TARGET:
        if not world.gather_resource(actor, PRISM).success:
            break
        bus.publish(to_gather_event(actor, PRISM))

    if escort.location != NEBULA_REGION:
        recall = _move(context, renderer, escort, NEBULA_REGION)
        if recall.success:
            actor.add_log(f"{escort.call_sign} revient se placer en escorte rapprochée.")

    # Step 2: the guardian
    world.travel(actor, RELIQUARY_REGION)
    renderer.render_region(RELIQUARY_REGION, world.region(RELIQUARY_REGION))
    if _move(context, renderer, flagship, RELIQUARY_REGION).success:
        actor.add_log(f"{flagship.call_sign} escorte {actor.name} jusqu'à la Station Reliquaire.")
    if _move(context, renderer, escort, RELIQUARY_REGION).success:
        actor.add_log(f"{escort.call_sign} verrouille un couloir défensif autour de la station.")

    actor.restore(0.35)
    combat = context.combat.fight(actor, world, GUARDIAN)
    bus.publish(to_combat_event(GUARDIAN, combat))
    renderer.render_encounter(GUARDIAN, combat)
    if GUARDIAN_DROP in combat.drops:
        bus.publish(to_gather_event(actor, GUARDIAN_DROP))

    if not combat.victory:
        actor.add_log("Le spectre reste invaincu pour le moment. Le scénario s'arrête ici.")
        return _finish(context, renderer, stopped_early=True)

    # Step 3: the beacon
    world.travel(actor, NEBULA_REGION)
    renderer.render_region(NEBULA_REGION, world.region(NEBULA_REGION))
    flagship_return = _move(context, renderer, flagship, NEBULA_REGION)
    if flagship_return.success and flagship_return.travel_time > 0:
        actor.add_log(f"{flagship.call_sign} se repositionne sur le chantier orbital de la nébuleuse.")
    escort_support = _move(context, renderer, escort, NEBULA_REGION)
    if escort_support.success and escort_support.travel_time > 0:
        actor.add_log(f"{escort.call_sign} transfère ses relevés au labo d'artisanat.")

    actor.restore(0.25)
    crafted = context.crafting.craft(actor, BEACON)
    bus.publish(to_craft_event(BEACON, crafted))
    renderer.render_crafting(BEACON, crafted, actor)

    # Step 4: the relay
    activated = world.activate_sanctuary(actor, RELAY)
    bus.publish(to_activation_event(RELAY, activated))
    renderer.render_sanctuary(RELAY, activated)
    if context.quest.completed:
        actor.add_log(f"La nébuleuse retrouve son éclat grâce à {actor.name} !")

    utility = world.refit_ship(escort, "utility")
    if utility.success and utility.module is not None:
        actor.add_log(f"{escort.call_sign} installe {utility.module.name} pour soutenir les opérations de sondage.")
        renderer.render_starship(escort)

    if generated:
        renderer.header("Protocoles d'auto-cartographie")
        actor.add_log("L'IA de bord déploie des sondes pour cartographier les nouveaux secteurs auto-générés.")
        for sector_name in generated[:SURVEY_LIMIT]:
            advance = _move(context, renderer, flagship, sector_name)
            if advance.success:
                actor.add_log(f"{flagship.call_sign} projette un corridor sécurisé vers {advance.destination}.")

            world.travel(actor, sector_name)
            renderer.render_region(sector_name, world.region(sector_name))
            harvest = world.auto_harvest(actor, sector_name, 1)
            if harvest.harvested and harvest.details:
                actor.add_log("Collecte automatisée : " + ", ".join(harvest.details))
            else:
                actor.add_log("Collecte automatisée : rien de notable détecté.")

        world.travel(actor, NEBULA_REGION)
        _move(context, renderer, flagship, NEBULA_REGION)
        _move(context, renderer, escort, NEBULA_REGION)

    return _finish(context, renderer)
