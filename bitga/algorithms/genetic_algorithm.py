"""
Main Genetic Algorithm controller

Runs the generational loop: report the best individual of the current
population, track the best-so-far, stop on a perfect solution, otherwise breed
the next population into the spare buffer and swap the two buffers.
"""

import time
import logging
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from ..config import GAConfig
from ..exceptions import ConfigurationError
from ..utils import create_rng
from ..genetic import Population, Individual, TournamentSelection, SinglePointCrossover, BitFlipMutation

# Called with the 1-based generation number and that generation's best individual
GenerationCallback = Callable[[int, Individual], None]


class GeneticAlgorithm:
    """
    Main controller for the Genetic Algorithm evolution process
    """
    
    def __init__(self, 
                 config: GAConfig,
                 selection_operator: TournamentSelection,
                 crossover_operator: SinglePointCrossover,
                 mutation_operator: BitFlipMutation,
                 rng: Optional[np.random.Generator] = None,
                 generation_callback: Optional[GenerationCallback] = None):
        """
        Initialize genetic algorithm
        
        Args:
            config: GA configuration parameters
            selection_operator: Selection strategy
            crossover_operator: Crossover strategy
            mutation_operator: Mutation strategy
            rng: Random generator shared by all operators. Created from
                config.random_seed when omitted
            generation_callback: Receives the best individual of every generation
        """
        # Validation happens before anything is allocated
        config.validate()
        self._check_operators(config, selection_operator, mutation_operator)
        
        self.config = config
        self.selection_operator = selection_operator
        self.crossover_operator = crossover_operator
        self.mutation_operator = mutation_operator
        self.rng = rng if rng is not None else create_rng(config.random_seed)
        self.generation_callback = generation_callback
        
        # Evolution state
        self.population: Optional[Population] = None
        self.next_population: Optional[Population] = None
        self.best_individual: Optional[Individual] = None
        self.best_generation = 0
        self.generations_run = 0
        self.discarded_children = 0
        self.termination_reason: Optional[str] = None
        
        # History, one entry per evaluated generation
        self.best_error_history: List[int] = []
        self.mean_error_history: List[float] = []
        self.diversity_history: List[float] = []
        
        # Timing
        self.start_time: Optional[float] = None
        
        # Logging
        self.logger = logging.getLogger(__name__)
    
    @classmethod
    def from_config(cls,
                    config: GAConfig,
                    rng: Optional[np.random.Generator] = None,
                    generation_callback: Optional[GenerationCallback] = None) -> 'GeneticAlgorithm':
        """Build a GA with the standard operators configured from ``config``"""
        return cls(
            config=config,
            selection_operator=TournamentSelection(tournament_size=config.tournament_size),
            crossover_operator=SinglePointCrossover(),
            mutation_operator=BitFlipMutation(mutation_rate=config.mutation_rate),
            rng=rng,
            generation_callback=generation_callback
        )
    
    @staticmethod
    def _check_operators(config: GAConfig,
                         selection_operator: TournamentSelection,
                         mutation_operator: BitFlipMutation) -> None:
        """Operators must run with the parameters the config reports"""
        if selection_operator.tournament_size != config.tournament_size:
            raise ConfigurationError(
                f"Selection operator uses tournament size {selection_operator.tournament_size}, "
                f"config says {config.tournament_size}", 'tournament_size')
        if mutation_operator.mutation_rate != config.mutation_rate:
            raise ConfigurationError(
                f"Mutation operator uses rate {mutation_operator.mutation_rate}, "
                f"config says {config.mutation_rate}", 'mutation_rate')
    
    def run(self, initial_population: Optional[Population] = None) -> Dict:
        """
        Run the complete genetic algorithm evolution
        
        Args:
            initial_population: Optional starting population. Its size must
                match config.population_size. A random one is drawn otherwise
            
        Returns:
            Dictionary with evolution results
        """
        self.logger.info("Starting Genetic Algorithm evolution")
        self.logger.info(f"Configuration: Population={self.config.population_size}, "
                        f"Generations={self.config.max_generations}, "
                        f"Mutation={self.config.mutation_rate}, "
                        f"Tournament={self.config.tournament_size}")
        
        self._initialize_population(initial_population)
        self.start_time = time.time()
        
        try:
            for generation in range(self.config.max_generations):
                self.generations_run = generation + 1
                
                current_best = self.population.best_individual()
                self._update_statistics()
                self._report_generation(generation + 1, current_best)
                
                if current_best.error < self.best_individual.error:
                    self.best_individual = current_best
                    self.best_generation = generation + 1
                    self.logger.debug(f"New best at generation {generation + 1}: error={current_best.error}")
                
                if self.best_individual.error == 0:
                    self.termination_reason = f"Perfect solution found at generation {self.best_generation}"
                    self.logger.info(self.termination_reason)
                    break
                
                self.evolve_population(self.population, self.next_population)
                
                # Double buffering: the consumed population becomes the next write target
                self.population, self.next_population = self.next_population, self.population
            
            if self.termination_reason is None:
                self.termination_reason = f"Maximum generations reached ({self.config.max_generations})"
                self.logger.info(self.termination_reason)
            
            return self._compile_results()
            
        except Exception as e:
            self.logger.error(f"Error during evolution: {e}")
            raise
        finally:
            total_time = time.time() - self.start_time if self.start_time else 0
            self.logger.info(f"Evolution completed in {total_time:.2f} seconds")
    
    def _initialize_population(self, initial_population: Optional[Population]) -> None:
        """Create both population buffers and the initial best-so-far record"""
        size = self.config.population_size
        
        if initial_population is None:
            self.logger.info("Initializing population...")
            self.population = Population.random(size, self.rng)
        else:
            if len(initial_population) != size:
                raise ConfigurationError(
                    f"Initial population has {len(initial_population)} individuals, "
                    f"expected {size}", 'population_size')
            self.logger.info("Using provided initial population")
            # The caller keeps its own population, the driver overwrites its buffers
            self.population = Population.from_individuals(initial_population.individuals)
        
        self.next_population = Population.empty(size)
        
        # The initial best counts as found in generation 1
        self.best_individual = self.population.best_individual()
        self.best_generation = 1
        self.generations_run = 0
        self.discarded_children = 0
        self.termination_reason = None
        self.best_error_history = []
        self.mean_error_history = []
        self.diversity_history = []
    
    def evolve_population(self, source: Population, target: Population) -> int:
        """
        Breed the next generation from ``source`` into every slot of ``target``
        
        Slots are filled in pairs. With an odd size the last slot only takes
        the first child of its pair.
        
        Returns:
            Number of children discarded
        """
        size = len(target)
        discarded = 0
        
        for i in range(0, size, 2):
            child1, child2 = self._create_offspring(source)
            
            target[i] = Individual(child1)
            if i + 1 < size:
                target[i + 1] = Individual(child2)
            else:
                discarded += 1
        
        self.discarded_children += discarded
        return discarded
    
    def _create_offspring(self, source: Population) -> Tuple[np.ndarray, np.ndarray]:
        """Select two parents, cross them over and mutate both children"""
        # The same parent may be drawn twice
        parent1 = source[self.selection_operator.select(source, self.rng)]
        parent2 = source[self.selection_operator.select(source, self.rng)]
        
        child1, child2 = self.crossover_operator.crossover(parent1.genome, parent2.genome, self.rng)
        
        child1 = self.mutation_operator.mutate(child1, self.rng)
        child2 = self.mutation_operator.mutate(child2, self.rng)
        
        return child1, child2
    
    def _update_statistics(self) -> None:
        """Record statistics of the current population"""
        stats = self.population.get_statistics()
        
        self.best_error_history.append(stats['best_error'])
        self.mean_error_history.append(stats['mean_error'])
        self.diversity_history.append(stats['diversity'])
        
        self.logger.debug(
            f"Generation {self.generations_run:3d}: "
            f"Best={stats['best_error']}, "
            f"Avg={stats['mean_error']:.2f}, "
            f"Diversity={stats['diversity']:.3f}"
        )
    
    def _report_generation(self, generation: int, individual: Individual) -> None:
        if self.generation_callback is not None:
            self.generation_callback(generation, individual)
    
    def _compile_results(self) -> Dict:
        """Compile final evolution results"""
        total_time = time.time() - self.start_time if self.start_time else 0
        
        results = {
            # Best solution (serializable format)
            'best_individual': {
                'genome': self.best_individual.to_bitstring(),
                'error': self.best_individual.error,
            },
            'best_error': self.best_individual.error,
            'best_generation': self.best_generation,
            
            # Evolution statistics
            'generations_run': self.generations_run,
            'success': self.best_individual.error == 0,
            'termination_reason': self.termination_reason,
            'discarded_children': self.discarded_children,
            
            # Performance metrics
            'total_time': total_time,
            
            # Evolution history
            'best_error_history': self.best_error_history.copy(),
            'mean_error_history': self.mean_error_history.copy(),
            'diversity_history': self.diversity_history.copy(),
            
            # Configuration used
            'config': self.config.to_dict(),
        }
        
        self.logger.info(f"Evolution results: {self.generations_run} generations, "
                        f"Best error: {results['best_error']}, "
                        f"Found at generation: {self.best_generation}")
        
        return results
